# errors.py
# exceptions raised by the lottieedit core


class LottieEditError(Exception):
    pass


class StructuralValidationError(LottieEditError):
    """Document failed one or more shape rules; `errors` holds the messages."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid Lottie JSON.")


class PathResolutionError(LottieEditError):
    """A path does not resolve against the document being edited."""

    def __init__(self, path, step=None, reason="missing"):
        self.path = tuple(path)
        self.step = step
        self.reason = reason
        super().__init__(f"cannot resolve {step!r} in path {path_to_str(self.path)} ({reason})")


class LottieFileError(LottieEditError):
    pass


def path_to_str(steps):
    return "[" + ", ".join(repr(x) for x in steps) + "]"
