#
#
#

import logging

from requests import Session

from octodns import __VERSION__ as octodns_version

from . import __version__ as package_version
from .exceptions import (
    GlesysClientException,
    GlesysClientNotFound,
    GlesysClientUnauthorized,
)


class GlesysClient(object):
    BASE_URL = 'https://api.glesys.com'

    def __init__(self, project, api_key, base_url=None, timeout=None):
        self.log = logging.getLogger('GlesysClient')
        self.log.debug(
            '__init__: project=%s, api_key=***, base_url=%s, timeout=%s',
            project,
            base_url,
            timeout,
        )
        session = Session()
        session.auth = (project, api_key)
        session.headers.update(
            {
                'Accept': 'application/json',
                'User-Agent': f'octodns/{octodns_version} octodns-glesys/{package_version}',
            }
        )
        self._session = session
        self.base_url = (base_url or self.BASE_URL).rstrip('/')
        self.timeout = timeout

    def _status_text(self, response):
        try:
            return response.json()['response']['status']['text']
        except (ValueError, KeyError, TypeError):
            return None

    def _do(self, method, path, data=None, timeout=None):
        url = f'{self.base_url}/{path}'
        self.log.debug('_do: method=%s, path=%s', method, path)
        response = self._session.request(
            method,
            url,
            json=data,
            timeout=timeout if timeout is not None else self.timeout,
        )
        if response.status_code == 401:
            raise GlesysClientUnauthorized()
        if response.status_code == 404:
            raise GlesysClientNotFound()
        if response.status_code >= 400:
            text = self._status_text(response)
            if text is None:
                response.raise_for_status()
            raise GlesysClientException(
                f'Request failed with HTTP error: {response.status_code} ({text})'
            )
        return response

    def _do_json(self, method, path, data=None, timeout=None):
        response = self._do(method, path, data, timeout)
        if not response.content:
            return {}
        return response.json()

    def get(self, path, timeout=None):
        return self._do_json('GET', path, timeout=timeout)

    def post(self, path, data=None, timeout=None):
        return self._do_json('POST', path, data=data, timeout=timeout)
