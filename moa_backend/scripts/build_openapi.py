import argparse
import json
import os
import sys

import yaml

from ..libs import Logger

log = Logger.get_logger(__name__)

DEFAULT_OUTPUT = "openapi/openapi.yaml"


def write_openapi(output: str, output_format: str = "yaml") -> dict:
    """Generate the OpenAPI document of the app and store it in a file

    Args:
        output (str): Path of the file to write, parent directories are created
        output_format (str): "yaml" or "json"

    Returns:
        dict: The generated OpenAPI document
    """
    from ..api import app

    schema = app.openapi()

    out_dir = os.path.dirname(output)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    with open(output, "w", encoding="utf-8") as f:
        if output_format == "json":
            json.dump(schema, f, indent=2)
            f.write("\n")
        else:
            yaml.safe_dump(schema, f, default_flow_style=False, sort_keys=False)

    log.info(f"Generated OpenAPI document at {output}")
    return schema


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export the OpenAPI document of the MOA backend")
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT, help=f"output file (default: {DEFAULT_OUTPUT})"
    )
    parser.add_argument("-f", "--format", choices=["yaml", "json"], default="yaml")
    args = parser.parse_args(argv)

    try:
        write_openapi(args.output, args.format)
    except OSError as e:
        log.error(f"Could not generate docs: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
