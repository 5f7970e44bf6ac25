"""Module entrypoint.

Allows:
    python -m access_log_counter
"""

from __future__ import annotations

from access_log_counter.server.log_server import main

if __name__ == "__main__":
    main()
