from enum import Enum

class ResultType(str, Enum):
    """Discriminator of the response envelope"""
    OK = "ok"
    ERROR = "error"

    @classmethod
    def default(cls) -> "ResultType":
        """Value used when building a response record by hand, never when parsing"""
        return cls.OK
