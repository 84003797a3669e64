__all__ = ['SpotistructException', 'HttpError', 'InsufficientScope', 'ResourceTypeMismatch',
           'AccessDenied', 'AuthorizationException']


class SpotistructException(Exception):
    pass


class AuthorizationException(SpotistructException):
    """ The authorization callback contained an error (including access denied by the user) """
    pass


class AccessDenied(AuthorizationException):
    """ Raised when the user decides to not grant access to the app """
    def __init__(self, message="the user did not grant the authorization"):
        super().__init__(message)


class HttpError(SpotistructException):
    """ Error during HTTP request. It has a ``response`` attribute. """
    def __init__(self, response):
        details = 'error'
        if response.text and response.text != 'null':
            try:
                error = response.json()['error']
                details = error['message'] if isinstance(error, dict) else error
            except (ValueError, KeyError, TypeError):
                details = response.text

        message = '{status} error: {details}\n' \
                  'URL: {url}'.format(status=response.status_code, details=details,
                                      url=response.url)
        self.response = response
        self.status_code = response.status_code
        super().__init__(message)


class InsufficientScope(SpotistructException):
    """
    Raised when the scope of the session is known to be insufficient to carry out an API
    request **before** the request is made.

    Not every scope error can be caught in advance: when the check is not possible, Spotify
    answers with a 403 and an :class:`HttpError` is raised instead.
    """
    def __init__(self, needed_scope, current_scope):
        missing_scope = list(sorted(set(needed_scope) - set(current_scope)))
        msg = ('Insufficient client scope for the request.\n'
               'The current scope is: {}.\n'
               'But the API call requires: {}.\n'
               'Missing scopes: {}\n'
               .format(sorted(current_scope), sorted(needed_scope), missing_scope))
        super().__init__(msg)
        self.current_scope = current_scope
        self.needed_scope = needed_scope
        self.missing_scope = missing_scope


class ResourceTypeMismatch(SpotistructException):
    """
    Raised when the caller expects a Spotify resource of some kind but gets another.

    Note: "type" here is the Spotify type of the resource (the "type" field of the JSON object),
    not a Python type.
    """
    def __init__(self, expected_type, actual_type):
        msg = 'expected type %r but got type %r' % (expected_type, actual_type)
        super().__init__(msg)
        self.expected_type = expected_type
        self.actual_type = actual_type
