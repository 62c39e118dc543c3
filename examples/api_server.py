"""
Example: API Server

Demonstrates running the FastAPI server for hostname parsing.

The PSL source comes from configuration (PSL_LOCAL_PATH, or a snapshot in
PSL_CACHE_DIR, or a fresh download):
```bash
PSL_LOCAL_PATH=public_suffix_list.dat uv run python examples/api_server.py

# In another terminal, query the API:
curl "http://localhost:8000/v1/parse?input=https://www.example.co.uk/path"
curl http://localhost:8000/v1/psl
curl -X POST http://localhost:8000/v1/psl/refresh
```
"""

import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def main():
    """Run the API server."""
    import uvicorn

    from tld_extract.api.server import app
    from tld_extract.config import get_config

    config = get_config()

    print("=" * 80)
    print("Starting TLD Extract API Server")
    print("=" * 80)
    print()
    print(f"The server will start on http://{config.api.host}:{config.api.port}")
    print()
    print("API Endpoints:")
    print("  GET  /                      - Health check")
    print("  GET  /v1/parse?input=...    - Split a URL or hostname")
    print("  GET  /v1/psl                - Rule counts")
    print("  POST /v1/psl/refresh        - Fetch the latest PSL")
    print()

    uvicorn.run(app, host=config.api.host, port=config.api.port, log_level="info")


if __name__ == "__main__":
    main()
