"""A Transport that talks to a real XNAT server over HTTP.

Authentication is whatever `requests` accepts as `auth` - most XNAT deployments are fine
with a (user, password) tuple.
"""

import concurrent.futures
import os
import threading
import typing as ty
import uuid
import xml.etree.ElementTree as ElementTree

import requests

from thds.core import log, tmp
from thds.core.types import StrOrPath

from . import conf
from .errors import TransportError
from .transport import JobHandle

logger = log.getLogger(__name__)


def _connpool_session(connection_pool_size: int) -> requests.Session:
    session = requests.Session()
    adapter = requests.adapters.HTTPAdapter(
        pool_connections=connection_pool_size, pool_maxsize=connection_pool_size
    )
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def parse_catalog_xml(body: bytes) -> ty.List[ty.Dict[str, str]]:
    """One {file name: digest} record per catalog entry, in catalog order.

    Entries without a digest are left out, since there is nothing to verify against.
    Anything that isn't a catalog (cat:Catalog, cat:DCMCatalog, ...) has no records.
    """
    root = ElementTree.fromstring(body)
    if not _local_name(root.tag).endswith("Catalog"):
        return []

    records = []
    for elem in root.iter():
        if _local_name(elem.tag) != "entry":
            continue
        name = elem.get("name") or elem.get("ID") or elem.get("URI")
        digest = elem.get("digest")
        if name and digest:
            records.append({name: digest})
    return records


def parse_result_set(payload: ty.Mapping[str, ty.Any]) -> ty.List[ty.Dict[str, str]]:
    rows = payload.get("ResultSet", dict()).get("Result", [])
    return [{str(k): str(v) for k, v in row.items()} for row in rows]


def parse_results(response: requests.Response) -> ty.List[ty.Dict[str, str]]:
    try:
        if "json" in response.headers.get("Content-Type", ""):
            return parse_result_set(response.json())
        return parse_catalog_xml(response.content)
    except (ValueError, ElementTree.ParseError) as err:
        raise TransportError(f"Unparseable response from {response.url}") from err


class XnatSession:
    """Thread-safe; `get` jobs run on a small pool and are collected with `sync_fetch`."""

    def __init__(
        self,
        base_url: str,
        *,
        auth: ty.Any = None,
        timeout: ty.Optional[int] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout or conf.HTTP_TIMEOUT()
        self._session = _connpool_session(conf.CONNECTION_POOL_SIZE())
        if auth:
            self._session.auth = auth
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=conf.JOB_WORKERS(), thread_name_prefix="xnat-session"
        )
        self._jobs: ty.Dict[JobHandle, "concurrent.futures.Future[requests.Response]"] = dict()
        self._lock = threading.Lock()

    def url(self, uri: str) -> str:
        return f"{self.base_url}/{uri.lstrip('/')}"

    def _request(self, method: str, uri: str, **kwargs: ty.Any) -> requests.Response:
        try:
            response = self._session.request(method, self.url(uri), timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.RequestException as err:
            raise TransportError(f"{method} {uri} failed: {err}") from err
        return response

    def upload(self, local_path: StrOrPath, request_uri: str) -> None:
        with open(local_path, "rb") as f:
            self._request("PUT", request_uri, data=f)
        logger.debug("PUT %s complete", request_uri)

    def get(self, uri: str) -> JobHandle:
        params = None if "format=" in uri else {"format": "xml"}
        handle = uuid.uuid4()
        future = self._executor.submit(self._request, "GET", uri, params=params)
        with self._lock:
            self._jobs[handle] = future
        return handle

    def sync_fetch(self, handle: JobHandle) -> ty.List[ty.Dict[str, str]]:
        with self._lock:
            future = self._jobs.pop(handle)  # KeyError for a handle we never issued
        return parse_results(future.result())

    def download(self, dest: StrOrPath, uri: str) -> None:
        with tmp.temppath_same_fs(dest) as tpath:
            with self._request("GET", uri, stream=True) as response:
                try:
                    with open(tpath, "wb") as f:
                        for chunk in response.iter_content(chunk_size=conf.DOWNLOAD_CHUNK_SIZE()):
                            f.write(chunk)
                except requests.RequestException as err:
                    raise TransportError(f"Download of {uri} was interrupted") from err
            os.replace(tpath, dest)
        logger.debug("Downloaded %s to %s", uri, dest)

    def delete(self, uri: str) -> None:
        self._request("DELETE", uri)

    def exists(self, uri: str) -> bool:
        try:
            response = self._session.head(self.url(uri), timeout=self.timeout, allow_redirects=True)
            if response.status_code == 404:
                return False
            response.raise_for_status()
        except requests.RequestException as err:
            raise TransportError(f"HEAD {uri} failed: {err}") from err
        return 200 <= response.status_code < 300

    def close(self) -> None:
        self._executor.shutdown(wait=True)
        self._session.close()

    def __enter__(self) -> "XnatSession":
        return self

    def __exit__(self, *_exc: ty.Any) -> None:
        self.close()
