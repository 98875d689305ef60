import asyncio
import json
import os
import sys

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "backend")))

from app.config import settings
from app.services.exceptions import ScanError
from app.services.scan_runner import ScanRunner

async def main(url: str) -> int:
    print(f"Running scan for {url}...", file=sys.stderr)
    
    runner = ScanRunner(settings)
    try:
        result = await runner.scan(url)
    except ScanError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        if e.details:
            print(f"Details: {e.details}", file=sys.stderr)
        return 1
    
    print(json.dumps(result.model_dump(), indent=2))
    return 0

if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python run_scan.py <url>", file=sys.stderr)
        sys.exit(2)
    sys.exit(asyncio.run(main(sys.argv[1])))
