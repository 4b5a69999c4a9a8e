"""Human-readable diagnostic messages for engine availability."""

EXECUTABLE_NOT_DEFINED = "The executable for transcoding engine {engine} is not defined"
PLATFORM_INCOMPATIBLE = "Transcoding engine {engine} is not compatible with this platform"
EXECUTABLE_NOT_FOUND = 'The executable "{path}" for transcoding engine {engine} was not found'
MISSING_EXECUTE_PERMISSION = (
    'Insufficient permission to execute "{path}" for transcoding engine {engine}'
)
AVISYNTH_NOT_FOUND = "Transcoding engine {engine} is unavailable since AviSynth couldn't be found"
ENGINE_ERROR = "Transcoding engine {engine} reported an error"
EXIT_CODE = "Transcoding engine {engine} returned exit code {exit_code}"
NO_DIAGNOSTIC = ": no further information is available"
TSMUXER_LINUX_HINT = (
    "tsMuxeR is known to fail on 64-bit Linux without 32-bit compatibility "
    "libraries; install them or use another engine"
)


def engine_error(engine: object, detail: str | None = None) -> str:
    """Format the generic engine error, optionally followed by a detail line."""
    message = ENGINE_ERROR.format(engine=engine)
    if detail is None:
        return message + NO_DIAGNOSTIC
    return f"{message} \n{detail}"
