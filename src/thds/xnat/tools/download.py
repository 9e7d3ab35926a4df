import argparse
from pathlib import Path

from thds.xnat import download
from thds.xnat.resource import XnatFile

from ._session import add_base_url_arg, session_from_args


def main():
    parser = argparse.ArgumentParser(description="Download a file from an XNAT resource.")
    parser.add_argument("parent_uri", help="The containing resource.")
    parser.add_argument("name", help="The file's name within that resource.")
    parser.add_argument("dest", type=Path, help="Where to write the file locally.")
    add_base_url_arg(parser)
    args = parser.parse_args()

    with session_from_args(args) as session:
        dest = download(XnatFile(args.parent_uri, args.name), session, args.dest)
    print(dest.resolve())


if __name__ == "__main__":
    main()
