from .exceptions import UrlError, FormatError
from .codec import encode, decode
from .query import Query, QueryParameter
from .userinfo import UserInfo
from .relative import RelativeUrl
from .absolute import AbsoluteUrl, http_url, https_url
from .adapters import query_pairs

__version__ = "0.1.0"
