import argparse
from pathlib import Path

from thds.xnat import upload
from thds.xnat.resource import XnatFile

from ._session import add_base_url_arg, session_from_args


def _key_value(kv: str) -> tuple:
    key, sep, value = kv.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got {kv!r}")
    return key, value


def main():
    parser = argparse.ArgumentParser(description="Upload a file into an XNAT resource and verify it.")
    parser.add_argument(
        "parent_uri", help="The containing resource, e.g. /data/projects/P/subjects/S/resources/R"
    )
    parser.add_argument("path", type=Path, help="A local file you want to upload.")
    parser.add_argument("--name", help="Remote file name. Defaults to the local file name.")
    parser.add_argument("--format", default="", help="e.g. DICOM")
    parser.add_argument("--content", default="", help="e.g. T1_RAW")
    parser.add_argument("--tags", default="")
    parser.add_argument(
        "--property",
        "-p",
        type=_key_value,
        action="append",
        default=[],
        help="Extra KEY=VALUE metadata to send with the upload. May be repeated.",
    )
    add_base_url_arg(parser)
    args = parser.parse_args()

    xfile = XnatFile(args.parent_uri, args.name or args.path.name, local_file_path=str(args.path))
    xfile.file_format = args.format
    xfile.file_content = args.content
    xfile.file_tags = args.tags
    for key, value in args.property:
        xfile.properties.set(key, value)

    with session_from_args(args) as session:
        xfile.refresh_exists(session)
        upload(xfile, session)
    print(xfile.uri())


if __name__ == "__main__":
    main()
