# Errors surfaced to the client as {"success": false, "error": message}


class DatasetError(Exception):
    status_code = 500
    message = "Dataset error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self):
        return {"success": False, "error": self.message}


class MissingFieldError(DatasetError):
    status_code = 400
    message = "Missing digit or imageData"


class OutOfRangeError(DatasetError):
    status_code = 400
    message = "Digit must be 0-9"


class WriteError(DatasetError):
    status_code = 500
    message = "Failed to save file"
