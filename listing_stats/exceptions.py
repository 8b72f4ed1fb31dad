"""Errors raised by the listing report pipeline."""


class ListingStatsError(Exception):
    """Base error. `stage` names the pipeline step that failed."""
    stage = 'pipeline'

    def __init__(self, message: str, stage: str | None = None):
        self.message = message
        if stage is not None:
            self.stage = stage
        super().__init__(message)


class SourceUnreadableError(ListingStatsError):
    stage = 'load'


class MissingFieldError(SourceUnreadableError):
    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Source is missing required field(s): {', '.join(self.missing)}")


class ReportWriteError(ListingStatsError):
    stage = 'export'


class ReportFormatError(ValueError):
    """Report text does not follow the expected layout."""
