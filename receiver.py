#!/usr/bin/env python
import argparse
import datetime as dt
import logging
import signal
import sys
import time
import typing as t
from dataclasses import dataclass

import serial

from movavg.errors import InvalidConfiguration
from movavg.moving_average import MovingAverage
from movavg.reading import Reading
from movavg.registry import DEFAULT_STRATEGY, STRATEGIES, make_moving_average

logger = logging.getLogger(__name__)

SAMPLE_WIDTHS = (1, 2, 4)


def get_now_ns() -> int:
    return time.clock_gettime_ns(time.CLOCK_REALTIME)


@dataclass(frozen=True)
class ReceiverConfig:
    port: str
    window: int = 64
    strategy: str = DEFAULT_STRATEGY
    resync_every: t.Optional[int] = None
    every: int = 1
    sample_bytes: int = 2
    signed: bool = False
    scale: float = 1.0
    baudrate: int = 115200

    def __post_init__(self):
        if self.resync_every is not None and self.strategy != "corrected":
            raise InvalidConfiguration(
                f"resync_every only applies to the corrected strategy, not {self.strategy!r}"
            )

    def strategy_options(self) -> dict:
        if self.resync_every is None:
            return {}
        return {"resync_every": self.resync_every}


def open_port(port_path: str, baudrate: int = 115200) -> serial.Serial:
    return serial.Serial(
        port=port_path,
        baudrate=baudrate,
        parity=serial.PARITY_NONE,
        stopbits=serial.STOPBITS_ONE,
        bytesize=serial.EIGHTBITS,
        timeout=1,
    )


class Receiver:
    ser: serial.SerialBase
    average: MovingAverage[float]
    sample_count: int = 0
    # bytes of a sample cut short by a read timeout
    _pending: bytes = b""

    sample_bytes: int
    signed: bool
    scale: float

    def __init__(
        self,
        ser: serial.SerialBase,
        average: MovingAverage[float],
        sample_bytes: int = 2,
        signed: bool = False,
        scale: float = 1.0,
    ):
        if sample_bytes not in SAMPLE_WIDTHS:
            raise InvalidConfiguration(
                f"sample_bytes must be one of {SAMPLE_WIDTHS}, got {sample_bytes}"
            )

        self.ser = ser
        self.average = average
        self.sample_bytes = sample_bytes
        self.signed = signed
        self.scale = scale

    def read_sample(self) -> int:
        raw = self._pending + self.ser.read(self.sample_bytes - len(self._pending))
        if len(raw) != self.sample_bytes:
            self._pending = raw
            raise ValueError(f"short read: expected {self.sample_bytes} bytes, got {len(raw)}")
        self._pending = b""

        self.sample_count += 1
        return int.from_bytes(raw, byteorder="little", signed=self.signed)

    def stream(self, every: int = 1, limit: t.Optional[int] = None) -> t.Iterator[Reading[float]]:
        if every < 1:
            raise InvalidConfiguration(f"every must be at least 1, got {every}")

        last_emit = get_now_ns()
        attempts = 0
        since_emit = 0

        while limit is None or attempts < limit:
            attempts += 1
            try:
                sample = self.read_sample()
            except ValueError as e:
                logger.warning(f"error reading, continuing: {e}")
                continue

            self.average.add_sample(sample * self.scale)
            since_emit += 1

            if since_emit >= every:
                since_emit = 0
                now = get_now_ns()
                yield Reading(last_emit, now, len(self.average), self.average.get_average())
                last_emit = now


def parse_args(argv: t.Optional[list[str]] = None) -> ReceiverConfig:
    p = argparse.ArgumentParser(description="Print a moving average of samples read from a serial port.")
    p.add_argument("port", help="serial device, e.g. /dev/ttyUSB0")
    p.add_argument("--window", type=int, default=64, help="number of samples averaged")
    p.add_argument("--strategy", choices=sorted(STRATEGIES), default=DEFAULT_STRATEGY)
    p.add_argument("--resync-every", type=int, default=None, help="corrected strategy only; defaults to --window")
    p.add_argument("--every", type=int, default=1, help="emit a reading every N samples")
    p.add_argument("--sample-bytes", type=int, choices=SAMPLE_WIDTHS, default=2)
    p.add_argument("--signed", action="store_true")
    p.add_argument("--scale", type=float, default=1.0, help="multiplier applied to every raw sample")
    p.add_argument("--baudrate", type=int, default=115200)
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        return ReceiverConfig(
            port=args.port,
            window=args.window,
            strategy=args.strategy,
            resync_every=args.resync_every,
            every=args.every,
            sample_bytes=args.sample_bytes,
            signed=args.signed,
            scale=args.scale,
            baudrate=args.baudrate,
        )
    except InvalidConfiguration as e:
        p.error(str(e))


def __main__():
    config = parse_args()

    average = make_moving_average(config.strategy, config.window, **config.strategy_options())
    receiver = Receiver(
        open_port(config.port, config.baudrate),
        average,
        sample_bytes=config.sample_bytes,
        signed=config.signed,
        scale=config.scale,
    )
    start_time = dt.datetime.now()

    closed = False

    def close():
        nonlocal closed
        if not closed:
            closed = True
            duration = dt.datetime.now() - start_time
            if duration.seconds > 0:
                logger.info(f"captured {receiver.sample_count / duration.seconds} samples per second")
            receiver.ser.close()

    def signal_handler(signal, frame):
        close()
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    logger.info(f"reading {config.port} with {type(average).__name__}, window {config.window}")
    print(Reading.csv_header("average", "counts"))

    try:
        for reading in receiver.stream(config.every):
            print(reading, flush=True)
    finally:
        close()


if __name__ == "__main__":
    __main__()
