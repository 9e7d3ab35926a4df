import argparse

from thds.xnat import conf
from thds.xnat.session import XnatSession


def add_base_url_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--base-url",
        default=conf.BASE_URL(),
        help="The XNAT server, e.g. https://central.xnat.org. Defaults to THDS_XNAT_BASE_URL.",
    )


def session_from_args(args: argparse.Namespace) -> XnatSession:
    if not args.base_url:
        raise SystemExit("No XNAT server given - pass --base-url or set THDS_XNAT_BASE_URL")
    auth = (conf.USER(), conf.PASSWORD()) if conf.USER() else None
    return XnatSession(args.base_url, auth=auth)
