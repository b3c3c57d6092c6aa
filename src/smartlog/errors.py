from typing import Any


class SelfThrownError(RuntimeError):
    """Raised for warnings and errors logged in DEBUG_AGGRESSIVE mode.

    Not meant to be caught: it crashes the caller so the problem gets
    looked at before release.
    """

    def __init__(self, tag: str, message: str, error: Any = None):
        self.tag = tag
        self.message = message
        self.error = error
        text = f"Error at '{tag}': {message}"
        if error is not None:
            text += f"->{error!r}"
        super().__init__(text)
