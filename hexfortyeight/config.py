"""
Configuration of a hex 2048 game session.

The configuration is built once when a session starts and never changes afterwards.
"""

from dataclasses import dataclass

# ##>: Public move service used when no host is given.
DEFAULT_HOSTNAME = 'hex2048szb9jquj-hex15.functions.fnc.fr-par.scw.cloud'
DEFAULT_PORT = '80'


def build_url(hostname: str, radius: int, port: str | None = None) -> str:
    """
    Build the move service endpoint for a board radius.

    Parameters
    ----------
    hostname : str
        Host of the move service.
    radius : int
        Board radius, used as the request path.
    port : str, optional
        Port of the move service. Only used for localhost.

    Returns
    -------
    str
        ``http://<host>[:<port>]/<radius>`` for localhost, ``https://<host>/<radius>`` otherwise.

    Example
    -------
    >>> build_url('localhost', 2, '13337')
    'http://localhost:13337/2'
    >>> build_url('xxx', 2, '13337')
    'https://xxx/2'
    """
    is_localhost = 'localhost' in hostname

    url = 'http' if is_localhost else 'https'
    url = f'{url}://{hostname}'
    if is_localhost and port:
        url = f'{url}:{port}'
    return f'{url}/{radius}'


@dataclass(frozen=True)
class SessionConfig:
    """
    Parameters of one game session.

    Attributes
    ----------
    radius : int
        Board radius, between 2 and ``MAX_RADIUS``.
    hostname : str
        Host of the move service.
    port : str | None
        Port of the move service (only meaningful for localhost).
    timeout : float
        Timeout in seconds of a request to the move service.
    """

    MAX_RADIUS = 6

    radius: int = 2
    hostname: str = DEFAULT_HOSTNAME
    port: str | None = DEFAULT_PORT
    timeout: float = 5.0

    def __post_init__(self):
        if isinstance(self.radius, bool) or not isinstance(self.radius, int):
            raise ValueError(f'radius must be an integer, got {self.radius!r}')
        if not 2 <= self.radius <= self.MAX_RADIUS:
            raise ValueError(f'radius must be between 2 and {self.MAX_RADIUS}, got {self.radius}')
        if not self.hostname:
            raise ValueError('hostname must not be empty')
        if self.timeout <= 0:
            raise ValueError(f'timeout must be > 0, got {self.timeout}')

    @property
    def url(self) -> str:
        """Endpoint of the move service for this session."""
        return build_url(self.hostname, self.radius, self.port)
