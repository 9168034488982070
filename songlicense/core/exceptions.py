
class LicensingAPIError(Exception):
    kind = "Error"

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.kind, "message": self.message}

class NotFoundError(LicensingAPIError):
    kind = "NotFound"

class InvalidPayloadError(LicensingAPIError):
    kind = "InvalidPayload"

class UnauthorizedError(LicensingAPIError):
    kind = "Unauthorized"

class AlreadyApprovedError(LicensingAPIError):
    kind = "AlreadyApproved"

ERRORS_BY_KIND = {
    cls.kind: cls for cls in (
        NotFoundError,
        InvalidPayloadError,
        UnauthorizedError,
        AlreadyApprovedError,
    )
}
