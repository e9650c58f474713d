"""Domain errors and failure typing."""


class PipelineError(Exception):
    """Base class for pipeline failures."""

    error_code = "PIPELINE_ERROR"


class ConfigError(PipelineError):
    """Raised for invalid configuration."""

    error_code = "CONFIG_ERROR"


class StageError(PipelineError):
    """Raised for stage failures that abort the run."""

    error_code = "STAGE_ERROR"


class DecodeError(StageError):
    """Raised when the locations document is not an array of location objects."""

    error_code = "DECODE_ERROR"


class OutputError(StageError):
    """Raised when the output file cannot be written."""

    error_code = "IO_ERROR"


class ParseWarningsError(StageError):
    """Raised in strict mode when the status page produced warnings."""

    error_code = "PARSE_WARNINGS"

    def __init__(self, warnings: list) -> None:
        super().__init__(f"Status page produced {len(warnings)} parse warning(s)")
        self.warnings = list(warnings)
