"""Retrieval method value object."""

from enum import StrEnum


class RetrievalMethod(StrEnum):
    """Backend operation selected for a lookup."""

    GET_GLOBAL_CREDENTIALS = "GetGlobalCredentials"
    GET_CREDENTIAL_SUB_TYPE_BY_ID = "GetCredentialSubTypeByCredentialID"

    def __str__(self) -> str:
        return self.value

    @property
    def output_field(self) -> str:
        """Name of the state field this method populates."""
        match self:
            case RetrievalMethod.GET_GLOBAL_CREDENTIALS:
                return "items"
            case RetrievalMethod.GET_CREDENTIAL_SUB_TYPE_BY_ID:
                return "item"
