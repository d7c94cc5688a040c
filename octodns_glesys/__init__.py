#
#
#

import logging
import shlex
from collections import defaultdict

from octodns.provider.base import BaseProvider
from octodns.record import Record

from .exceptions import (
    GlesysClientException,
    GlesysClientNotFound,
    GlesysClientUnauthorized,
    GlesysClientValidationError,
)

__version__ = __VERSION__ = '0.0.1'

from .api_client import GlesysClient  # noqa: E402
from .domains import DomainService, to_ascii  # noqa: E402
from .models import (  # noqa: E402
    AddDomainParams,
    AddDomainRecordParams,
    Domain,
    DomainRecord,
    EditDomainParams,
    RegistrarInfo,
    UpdateDomainRecordParams,
)

__all__ = [
    'AddDomainParams',
    'AddDomainRecordParams',
    'Domain',
    'DomainRecord',
    'DomainService',
    'EditDomainParams',
    'GlesysClient',
    'GlesysClientException',
    'GlesysClientNotFound',
    'GlesysClientUnauthorized',
    'GlesysClientValidationError',
    'GlesysProvider',
    'RegistrarInfo',
    'UpdateDomainRecordParams',
    'to_ascii',
]


class GlesysProvider(BaseProvider):
    SUPPORTS_GEO = False
    SUPPORTS_DYNAMIC = False
    SUPPORTS_ROOT_NS = True
    SUPPORTS = set(
        ('A', 'AAAA', 'CAA', 'CNAME', 'MX', 'NS', 'PTR', 'SRV', 'TXT')
    )

    def __init__(self, id, project, api_key, *args, **kwargs):
        self.log = logging.getLogger(f'GlesysProvider[{id}]')
        timeout = kwargs.pop('timeout', None)
        base_url = kwargs.pop('base_url', None)
        self.log.debug(
            '__init__: id=%s, project=%s, api_key=***, timeout=%s',
            id,
            project,
            timeout,
        )
        super().__init__(id, *args, **kwargs)

        self._client = DomainService(
            GlesysClient(project, api_key, base_url=base_url, timeout=timeout)
        )

        self._domain_names = None
        self._zone_records = {}

    def _append_dot(self, value):
        if value == '@' or value[-1] == '.':
            return value
        return f'{value}.'

    def _host(self, record):
        return '' if record.host == '@' else record.host

    def _domains(self):
        if self._domain_names is None:
            self._domain_names = set(
                d.domain_name for d in self._client.list()
            )
        return self._domain_names

    def _data_for_multiple(self, _type, records):
        values = [record.data.replace(';', '\\;') for record in records]
        return {'ttl': records[0].ttl, 'type': _type, 'values': values}

    _data_for_A = _data_for_multiple
    _data_for_AAAA = _data_for_multiple
    _data_for_TXT = _data_for_multiple

    def _data_for_CAA(self, _type, records):
        values = []
        for record in records:
            raw = record.data
            try:
                flags, tag, value = shlex.split(raw)
                values.append({'flags': int(flags), 'tag': tag, 'value': value})
            except ValueError as e:
                self.log.warning(
                    '_data_for_CAA: failed to parse CAA record %r: %s, '
                    'using fallback values (flags=0, tag=issue)',
                    raw,
                    e,
                )
                values.append({'flags': 0, 'tag': 'issue', 'value': raw})
        return {'ttl': records[0].ttl, 'type': _type, 'values': values}

    def _data_for_single(self, _type, records):
        record = records[0]
        try:
            value = self._append_dot(record.data)
        except IndexError:
            self.log.warning(
                '_data_for_single: skipping %s record with empty data', _type
            )
            return None
        return {'ttl': record.ttl, 'type': _type, 'value': value}

    _data_for_CNAME = _data_for_single
    _data_for_PTR = _data_for_single

    def _data_for_MX(self, _type, records):
        values = []
        for record in records:
            try:
                preference, exchange = record.data.split()
                values.append(
                    {
                        'preference': int(preference),
                        'exchange': self._append_dot(exchange),
                    }
                )
            except ValueError as e:
                self.log.warning(
                    '_data_for_MX: skipping unparsable MX record %r: %s',
                    record.data,
                    e,
                )
        if not values:
            return None
        return {'ttl': records[0].ttl, 'type': _type, 'values': values}

    def _data_for_NS(self, _type, records):
        values = []
        for record in records:
            try:
                values.append(self._append_dot(record.data))
            except IndexError:
                self.log.warning(
                    '_data_for_NS: skipping NS record with empty data'
                )
        if not values:
            return None
        return {'ttl': records[0].ttl, 'type': _type, 'values': values}

    def _data_for_SRV(self, _type, records):
        values = []
        for record in records:
            try:
                priority, weight, port, target = record.data.split()
                values.append(
                    {
                        'port': int(port),
                        'priority': int(priority),
                        'target': self._append_dot(target),
                        'weight': int(weight),
                    }
                )
            except ValueError as e:
                self.log.warning(
                    '_data_for_SRV: skipping unparsable SRV record %r: %s',
                    record.data,
                    e,
                )
        if not values:
            return None
        return {'ttl': records[0].ttl, 'type': _type, 'values': values}

    def list_zones(self):
        self.log.debug('list_zones:')
        return sorted(f'{name}.' for name in self._domains())

    def zone_records(self, zone):
        if zone.name not in self._zone_records:
            domain_name = zone.name[:-1]
            if domain_name not in self._domains():
                return []
            self._zone_records[zone.name] = self._client.list_records(
                domain_name
            )

        return self._zone_records[zone.name]

    def populate(self, zone, target=False, lenient=False):
        self.log.debug(
            'populate: name=%s, target=%s, lenient=%s',
            zone.name,
            target,
            lenient,
        )

        values = defaultdict(lambda: defaultdict(list))
        for record in self.zone_records(zone):
            _type = record.type
            if _type not in self.SUPPORTS:
                self.log.warning(
                    'populate: skipping unsupported %s record', _type
                )
                continue
            values[self._host(record)][_type].append(record)

        before = len(zone.records)
        for name, types in values.items():
            for _type, records in types.items():
                data_for = getattr(self, f'_data_for_{_type}')
                data = data_for(_type, records)
                if data is None:
                    continue
                record = Record.new(
                    zone, name, data, source=self, lenient=lenient
                )
                zone.add_record(record, lenient=lenient)

        exists = zone.name in self._zone_records
        self.log.info(
            'populate:   found %s records, exists=%s',
            len(zone.records) - before,
            exists,
        )
        return exists

    def _params_for_multiple(self, record):
        for value in record.values:
            yield {'data': value.replace('\\;', ';'), 'ttl': record.ttl}

    _params_for_A = _params_for_multiple
    _params_for_AAAA = _params_for_multiple
    _params_for_NS = _params_for_multiple
    _params_for_TXT = _params_for_multiple

    def _params_for_CAA(self, record):
        for value in record.values:
            data = f'{value.flags} {value.tag} "{value.value}"'
            yield {'data': data, 'ttl': record.ttl}

    def _params_for_single(self, record):
        yield {'data': record.value, 'ttl': record.ttl}

    _params_for_CNAME = _params_for_single
    _params_for_PTR = _params_for_single

    def _params_for_MX(self, record):
        for value in record.values:
            data = f'{value.preference} {value.exchange}'
            yield {'data': data, 'ttl': record.ttl}

    def _params_for_SRV(self, record):
        for value in record.values:
            data = (
                f'{value.priority} {value.weight} {value.port} '
                f'{value.target}'
            )
            yield {'data': data, 'ttl': record.ttl}

    def _existing_records(self, existing):
        return [
            record
            for record in self.zone_records(existing.zone)
            if self._host(record) == existing.name
            and record.type == existing._type
        ]

    def _apply_Create(self, domain_name, change):
        new = change.new
        params_for = getattr(self, f'_params_for_{new._type}')
        for params in params_for(new):
            self._client.add_record(
                AddDomainRecordParams(
                    domain_name=domain_name,
                    host=new.name or '@',
                    type=new._type,
                    **params,
                )
            )

    def _apply_Update(self, domain_name, change):
        new = change.new
        params_for = getattr(self, f'_params_for_{new._type}')
        pending = list(params_for(new))
        existing = self._existing_records(change.existing)
        # Reuse existing record ids before adding or removing any
        for record, params in zip(existing, pending):
            self._client.update_record(
                record.record_id,
                UpdateDomainRecordParams(
                    host=new.name or '@', type=new._type, **params
                ),
            )
        for params in pending[len(existing) :]:
            self._client.add_record(
                AddDomainRecordParams(
                    domain_name=domain_name,
                    host=new.name or '@',
                    type=new._type,
                    **params,
                )
            )
        for record in existing[len(pending) :]:
            self._client.delete_record(record.record_id)

    def _apply_Delete(self, domain_name, change):
        for record in self._existing_records(change.existing):
            self._client.delete_record(record.record_id)

    def _apply(self, plan):
        desired = plan.desired
        changes = plan.changes
        self.log.debug(
            '_apply: zone=%s, len(changes)=%d', desired.name, len(changes)
        )

        domain_name = desired.name[:-1]
        if domain_name not in self._domains():
            self.log.debug('_apply:   no matching domain, creating')
            self._client.add_domain(AddDomainParams(domain_name=domain_name))

        for change in changes:
            class_name = change.__class__.__name__
            getattr(self, f'_apply_{class_name}')(domain_name, change)

        # Clear out the caches
        self._zone_records.pop(desired.name, None)
        self._domain_names = None
