#
#
#

from octodns.provider import ProviderException


class GlesysClientException(ProviderException):
    pass


class GlesysClientNotFound(GlesysClientException):
    def __init__(self):
        super().__init__('Not Found')


class GlesysClientUnauthorized(GlesysClientException):
    def __init__(self):
        super().__init__('Unauthorized')


class GlesysClientValidationError(GlesysClientException):
    def __init__(self, name, reason):
        super().__init__(f'Invalid domain name {name!r}: {reason}')
        self.name = name
