"""CGI front end. Reads `expr` and `mode` from QUERY_STRING and writes an HTML page."""

import logging
import os
import sys

from boolsolve.frontends.query import handle_query

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(
        stream=sys.stderr, level=logging.INFO, format="%(levelname)s: %(message)s"
    )
    status, page = handle_query(os.environ.get("QUERY_STRING"))
    print("Content-Type: text/html\n")
    print(page)
    return status


if __name__ == "__main__":
    sys.exit(main())
