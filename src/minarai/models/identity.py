"""
Client identity — the (applicationId, clientId, userId, deviceId) tuple.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# The server may hand back numeric ids.
IdentityValue = Optional[Union[str, int]]


class Identity(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    application_id: IdentityValue = Field(default=None, alias="applicationId")
    client_id: IdentityValue = Field(default=None, alias="clientId")
    user_id: IdentityValue = Field(default=None, alias="userId")
    device_id: IdentityValue = Field(default=None, alias="deviceId")

    def reconcile(self, data: Any) -> None:
        """Overwrite all four fields with the server's join acknowledgment.

        Fields absent from ``data`` become None; nothing local survives.
        A payload that is not a mapping raises ValidationError before any
        field changes.
        """
        joined = Identity.model_validate(data)
        self.application_id = joined.application_id
        self.client_id = joined.client_id
        self.user_id = joined.user_id
        self.device_id = joined.device_id

    def reset(self) -> None:
        self.client_id = None
        self.user_id = None

    def to_wire(self) -> dict[str, IdentityValue]:
        """camelCase dict with None kept; the `join-as-client` payload."""
        return self.model_dump(by_alias=True)

    def id_prefix(self) -> str:
        # Missing parts are left out, not rendered as "undefined", so pre-join ids
        # differ from the ones older clients sent.
        return "".join(
            str(v) for v in (self.application_id, self.client_id, self.user_id, self.device_id) if v is not None
        )
