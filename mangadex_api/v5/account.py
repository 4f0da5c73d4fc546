from ..api.endpoint import ContentMode, Endpoint, RequestMethod
from .base import Namespace

class RecoverAccount(Endpoint):
    """
    Start the account recovery process.

    Makes a request to ``POST /account/recover``.
    """
    method = RequestMethod.POST
    path = "/account/recover"
    content = ContentMode.BODY

    email: str

class AccountBuilder(Namespace):
    def recover(self, **fields) -> RecoverAccount:
        return self._bind(RecoverAccount(**fields))
