class RxError(Exception): ...


class MalformedDuration(RxError, ValueError): ...


class IngestError(RxError): ...


class PrescriptionError(RxError): ...


class FrameError(RxError): ...


def require(condition: bool, message: str, exc: type[RxError] = RxError):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
