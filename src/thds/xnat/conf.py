"""This is where fine-tuning environment variables are defined."""
from thds.core import config

HTTP_TIMEOUT = config.item("thds.xnat.http_timeout", 300, parse=int)  # seconds
# XNAT can take a long time to answer a PUT of a large DICOM archive,
# since it catalogs the file before responding.
DOWNLOAD_CHUNK_SIZE = config.item("thds.xnat.download_chunk_size", 2**20, parse=int)  # 1 MB
CONNECTION_POOL_SIZE = config.item("thds.xnat.connection_pool_size", 10, parse=int)
JOB_WORKERS = config.item("thds.xnat.job_workers", 4, parse=int)
# threads available to XnatSession.get for catalog and other listing requests.

BASE_URL = config.item("thds.xnat.base_url", "")
USER = config.item("thds.xnat.user", "")
PASSWORD = config.item("thds.xnat.password", "")
