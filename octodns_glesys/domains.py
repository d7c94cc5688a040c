#
#
#

import logging
from typing import List, Optional

import idna
from requests.utils import quote

from .clients import GlesysTransport
from .exceptions import GlesysClientException, GlesysClientValidationError
from .models import (
    AddDomainParams,
    AddDomainRecordParams,
    Domain,
    DomainRecord,
    EditDomainParams,
    UpdateDomainRecordParams,
)


def to_ascii(name: str) -> str:
    """Return the ASCII compatible encoding of a domain name.

    ASCII input comes back untouched. Anything else is encoded with IDNA 2008
    and UTS #46 mapping, e.g. 'bücher.de' becomes 'xn--bcher-kva.de'.

    Raises:
        GlesysClientValidationError: If the name can't be encoded
    """
    if name.isascii():
        return name
    try:
        return idna.encode(name, uts46=True).decode('ascii')
    except idna.IDNAError as e:
        raise GlesysClientValidationError(name, e) from e


def _unwrap(data, key):
    try:
        value = data['response'][key]
    except (KeyError, TypeError):
        value = None
    if value is None:
        raise GlesysClientException(f'Unexpected response, missing "{key}"')
    return value


def _unwrap_list(data, key):
    response = (data or {}).get('response') or {}
    return response.get(key) or []


class DomainService(object):
    """Typed operations over GleSYS domains and their DNS records.

    Every method issues exactly one request through the transport and either
    returns the typed result or raises. ``timeout`` is handed to the
    transport untouched.
    """

    def __init__(self, client: GlesysTransport):
        self.log = logging.getLogger('DomainService')
        self._client = client

    def add_domain(
        self, params: AddDomainParams, timeout: Optional[float] = None
    ) -> Domain:
        self.log.debug('add_domain: domain_name=%s', params.domain_name)
        params = params.model_copy(
            update={'domain_name': to_ascii(params.domain_name)}
        )
        data = self._client.post(
            'domain/add', params.to_payload(), timeout=timeout
        )
        return Domain.model_validate(_unwrap(data, 'domain'))

    def add_record(
        self, params: AddDomainRecordParams, timeout: Optional[float] = None
    ) -> DomainRecord:
        self.log.debug(
            'add_record: domain_name=%s, host=%s, type=%s',
            params.domain_name,
            params.host,
            params.type,
        )
        params = params.model_copy(
            update={'domain_name': to_ascii(params.domain_name)}
        )
        data = self._client.post(
            'domain/addrecord', params.to_payload(), timeout=timeout
        )
        return DomainRecord.model_validate(_unwrap(data, 'record'))

    def details(
        self, domainname: str, timeout: Optional[float] = None
    ) -> Domain:
        self.log.debug('details: domainname=%s', domainname)
        domainname = quote(to_ascii(domainname), safe='')
        data = self._client.get(
            f'domain/details/domainname/{domainname}', timeout=timeout
        )
        return Domain.model_validate(_unwrap(data, 'domain'))

    def delete_domain(
        self, domainname: str, timeout: Optional[float] = None
    ) -> None:
        self.log.debug('delete_domain: domainname=%s', domainname)
        self._client.post(
            'domain/delete',
            {'domainname': to_ascii(domainname)},
            timeout=timeout,
        )

    def delete_record(
        self, record_id: int, timeout: Optional[float] = None
    ) -> None:
        self.log.debug('delete_record: record_id=%s', record_id)
        self._client.post(
            'domain/deleterecord', {'recordid': record_id}, timeout=timeout
        )

    def edit_domain(
        self,
        domainname: str,
        params: EditDomainParams,
        timeout: Optional[float] = None,
    ) -> Domain:
        self.log.debug('edit_domain: domainname=%s', domainname)
        domainname = to_ascii(domainname)
        if params.domain_name is not None:
            params = params.model_copy(
                update={'domain_name': to_ascii(params.domain_name)}
            )
        # The path name identifies the domain, it wins over the params copy
        payload = params.to_payload()
        payload['domainname'] = domainname
        data = self._client.post('domain/edit', payload, timeout=timeout)
        return Domain.model_validate(_unwrap(data, 'domain'))

    def update_record(
        self,
        record_id: int,
        params: UpdateDomainRecordParams,
        timeout: Optional[float] = None,
    ) -> DomainRecord:
        self.log.debug('update_record: record_id=%s', record_id)
        payload = params.to_payload()
        payload['recordid'] = record_id
        data = self._client.post(
            'domain/updaterecord', payload, timeout=timeout
        )
        return DomainRecord.model_validate(_unwrap(data, 'record'))

    def list(self, timeout: Optional[float] = None) -> List[Domain]:
        self.log.debug('list:')
        data = self._client.get('domain/list', timeout=timeout)
        return [Domain.model_validate(d) for d in _unwrap_list(data, 'domains')]

    def list_records(
        self, domainname: str, timeout: Optional[float] = None
    ) -> List[DomainRecord]:
        self.log.debug('list_records: domainname=%s', domainname)
        data = self._client.post(
            'domain/listrecords',
            {'domainname': to_ascii(domainname)},
            timeout=timeout,
        )
        return [
            DomainRecord.model_validate(r)
            for r in _unwrap_list(data, 'records')
        ]
