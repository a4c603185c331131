class InvalidArgumentError(ValueError):
    pass


class FileSizeRangeError(ValueError):
    def __init__(
        self,
        power: int | None = None,
        message='File size larger than the maximum available size unit (power: {})',
    ) -> None:
        self.power = power
        self.message = message.format('?' if power is None else power)
        super().__init__(self.message)
