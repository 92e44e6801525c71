import argparse
import logging

import uvicorn

from .settings import API_PORT, UI_PORT


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="tracker", description="Run the expense tracker")
    parser.add_argument("component", choices=["api", "ui"])
    parser.add_argument("--host", default="127.0.0.1")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    if args.component == "api":
        uvicorn.run("tracker.api:create_app", factory=True, host=args.host, port=API_PORT)
    else:
        uvicorn.run("tracker.main:create_app", factory=True, host=args.host, port=UI_PORT)


if __name__ == "__main__":
    main()
