#
#
#

"""Typed GleSYS domain API entities and request parameters.

Attribute names are snake_case; the wire names are carried as aliases, and
models accept either form. Responses are immutable snapshots and ignore keys
they do not know about. Parameter models dump with their wire names and leave
out anything unset.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Snapshot(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class _Params(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Generates the request payload from this parameter object."""
        return self.model_dump(by_alias=True, exclude_none=True)


class RegistrarInfo(_Snapshot):
    state: Optional[str] = None
    state_description: Optional[str] = Field(
        default=None, alias='statedescription'
    )
    expire: Optional[str] = None
    auto_renew: Optional[str] = Field(default=None, alias='autorenew')
    tld: Optional[str] = None
    invoice_number: Optional[str] = Field(default=None, alias='invoicenumber')

    @field_validator('invoice_number', mode='before')
    @classmethod
    def _normalize_invoice_number(cls, value):
        # Sent as a string, a number, false or not at all
        if value is None or value is False or value == '':
            return None
        return str(value)


class Domain(_Snapshot):
    domain_name: str = Field(alias='domainname')
    create_time: Optional[datetime] = Field(default=None, alias='createtime')
    display_name: Optional[str] = Field(default=None, alias='displayname')
    record_count: int = Field(default=0, alias='recordcount')
    registrar_info: Optional[RegistrarInfo] = Field(
        default=None, alias='registrarinfo'
    )

    @field_validator('create_time', mode='before')
    @classmethod
    def _empty_create_time(cls, value):
        return value or None


class DomainRecord(_Snapshot):
    record_id: int = Field(alias='recordid')
    domain_name: str = Field(default='', alias='domainname')
    host: str = ''
    type: str = ''
    data: str = ''
    ttl: int = 0


class AddDomainParams(_Params):
    domain_name: str = Field(alias='domainname')
    primary_name_server: Optional[str] = Field(
        default=None, alias='primarynameserver'
    )
    responsible_person: Optional[str] = Field(
        default=None, alias='responsibleperson'
    )
    ttl: Optional[int] = None
    refresh: Optional[int] = None
    retry: Optional[int] = None
    expire: Optional[int] = None
    minimum: Optional[int] = None
    create_records: int = Field(default=0, alias='createrecords')


class EditDomainParams(_Params):
    domain_name: Optional[str] = Field(default=None, alias='domainname')
    primary_name_server: Optional[str] = Field(
        default=None, alias='primarynameserver'
    )
    responsible_person: Optional[str] = Field(
        default=None, alias='responsibleperson'
    )
    ttl: Optional[int] = None
    refresh: Optional[int] = None
    retry: Optional[int] = None
    expire: Optional[int] = None
    minimum: Optional[int] = None


class AddDomainRecordParams(_Params):
    domain_name: str = Field(alias='domainname')
    host: str
    type: str
    data: str
    ttl: Optional[int] = None


class UpdateDomainRecordParams(_Params):
    host: Optional[str] = None
    type: Optional[str] = None
    data: Optional[str] = None
    ttl: Optional[int] = None
