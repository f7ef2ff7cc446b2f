#!/usr/bin/env python3
"""
Places API - Run Script
This script starts the FastAPI server on port 8888
"""

import sys
import subprocess
from pathlib import Path

import httpx

from app.core.config import settings

def print_colored(message, color="blue"):
    """Print colored output"""
    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "reset": "\033[0m"
    }
    print(f"{colors.get(color, '')}{message}{colors['reset']}")

def check_file_exists(filepath, error_message):
    """Check if a file exists"""
    if not Path(filepath).exists():
        print_colored(f"Error: {error_message}", "red")
        sys.exit(1)

def check_search_reachable(host):
    """Check if the search cluster answers on its root endpoint"""
    try:
        response = httpx.get(host, timeout=2.0)
    except httpx.HTTPError:
        return False
    return response.status_code < 500

def main():
    print_colored("Starting Places API...", "blue")

    # Check if we're in the backend directory
    check_file_exists("app/main.py", "app/main.py not found. Please run this script from the backend directory.")
    check_file_exists(settings.DATA_FILE, f"{settings.DATA_FILE} not found. The index is rebuilt from it on every start.")

    if settings.STORAGE_MODE == "elasticsearch":
        print_colored("Checking Elasticsearch connection...", "blue")
        unreachable = [h for h in settings.es_hosts if not check_search_reachable(h)]
        if unreachable:
            print_colored(f"Elasticsearch doesn't appear to be running at {', '.join(unreachable)}", "red")
            print("Please start Elasticsearch first:")
            print("  - Using Docker: docker run -d -p 9200:9200 -e discovery.type=single-node -e xpack.security.enabled=false elasticsearch:8.13.4")
            print("  - Or set STORAGE_MODE=local to serve straight from the data file")
            sys.exit(1)

    print_colored("All checks passed!", "green")
    print(f"API will be available at: http://localhost:{settings.PORT}")
    print(f"Health check: http://localhost:{settings.PORT}/health")
    print()
    print("Press Ctrl+C to stop the server")
    print()

    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "app.main:app",
            "--host", settings.HOST,
            "--port", str(settings.PORT)
        ], check=True)
    except KeyboardInterrupt:
        print_colored("\nServer stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\nError starting server: {e}", "red")
        sys.exit(1)

if __name__ == "__main__":
    main()
