"""Error types shared by the collections in this package."""

from datetime import timedelta


def _nanoseconds(duration):
    """Return a duration as a whole number of nanoseconds."""
    if isinstance(duration, timedelta):
        whole_seconds = duration.days * 86_400 + duration.seconds
        return whole_seconds * 1_000_000_000 + duration.microseconds * 1_000
    return int(duration)


class IndexOutOfRangeError(IndexError):
    """An index lies outside the valid range of a sequence."""

    def __init__(self, length, index):
        super().__init__(f"ekit: 下标超出范围，长度 {length}, 下标 {index}")
        self.length = length
        self.index = index


class InvalidTypeError(TypeError):
    """A value could not be converted to the expected type."""

    def __init__(self, want, got):
        super().__init__(f"ekit: 类型转换失败，预期类型:{want}, 实际值:{got!r}")
        self.want = want
        self.got = got


class InvalidIntervalError(ValueError):
    """A retry interval is not greater than zero."""

    def __init__(self, interval):
        super().__init__(
            f"ekit: 无效的间隔时间 {_nanoseconds(interval)}, 预期值应大于 0"
        )
        self.interval = interval


class InvalidMaxIntervalError(ValueError):
    """The maximum retry interval is shorter than the initial one."""

    def __init__(self, max_interval, initial_interval):
        super().__init__(
            f"ekit: 最大重试间隔的时间 [{_nanoseconds(max_interval)}] "
            f"应大于等于初始重试的间隔时间 [{_nanoseconds(initial_interval)}] "
        )
        self.max_interval = max_interval
        self.initial_interval = initial_interval