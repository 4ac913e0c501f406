# SPDX-License-Identifier: MIT

from taskweave.cleanup import register_cleanup
from taskweave.initialize import initialize
from taskweave.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
