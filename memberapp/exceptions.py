# memberapp/exceptions.py
"""
Failures reported by the genealogy services.

Each error carries ``msg``, the text shown to API callers. Join failures are
always raised inside the join transaction, so raising one rolls the whole
join back.
"""


class GenealogyError(Exception):
    msg = "Server Error"

    def __init__(self, detail=None):
        self.detail = detail
        super().__init__(self.msg if detail is None else f"{self.msg} ({detail})")


class InvalidSponsor(GenealogyError):
    msg = "Invalid Sponsor Code"


class DuplicateEmail(GenealogyError):
    msg = "Email already exists."


class MemberNotFound(GenealogyError):
    msg = "User Not Found"


class AuthenticationFailed(GenealogyError):
    msg = "Invalid Login"


class StorageFailure(GenealogyError):
    msg = "Server Error"
