#!/usr/bin/env python
"""Start the FastAPI application on the configured host and port."""
from admin_api.__main__ import main

if __name__ == "__main__":
    main()
