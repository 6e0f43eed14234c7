import argparse
import asyncio
import aiohttp
import logging
from pathlib import Path
from typing import Optional

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def submit_file(
    session: aiohttp.ClientSession,
    file_path: Path,
    api_url: str,
    api_key: Optional[str],
    output_dir: Optional[Path] = None,
    status_filter: str = "all",
    include_review: bool = False
) -> bool:
    """
    Import one CSV into the validator API and optionally save its export.

    The service keeps a single working set, so the export is fetched right
    after this file's import.
    """
    filename = file_path.name
    headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
    logger.info(f"Submitting {filename}...")

    try:
        with open(file_path, 'rb') as f:
            data = aiohttp.FormData()
            data.add_field('file', f, filename=filename, content_type='text/csv')

            async with session.post(f"{api_url}/records/import", data=data, headers=headers) as response:
                if response.status != 200:
                    error_text = await response.text()
                    logger.error(f"Import failed for {filename}: Status {response.status}, Error: {error_text}")
                    return False
                result = await response.json()

        counts = result.get("status_counts", {})
        logger.info(
            f"{filename}: {result.get('record_count', 0)} records - "
            f"approved={counts.get('approved', 0)}, "
            f"pending={counts.get('pending', 0)}, "
            f"rejected={counts.get('rejected', 0)}"
        )

        if output_dir is None:
            return True

        params = {"status": status_filter, "include_review": str(include_review).lower()}
        async with session.get(f"{api_url}/records/export", params=params, headers=headers) as response:
            if response.status == 404:
                logger.warning(f"No {status_filter} records to export for {filename}")
                return True
            if response.status != 200:
                error_text = await response.text()
                logger.error(f"Export failed for {filename}: Status {response.status}, Error: {error_text}")
                return False
            content = await response.text()

        output_file = output_dir / f"{file_path.stem}_{status_filter}.csv"
        with open(output_file, 'w', encoding='utf-8', newline='') as out_f:
            out_f.write(content)
        logger.info(f"Saved export for {filename} to {output_file}")
        return True

    except aiohttp.ClientError as e:
        logger.error(f"Request error submitting {filename}: {e}")
        return False


async def main():
    parser = argparse.ArgumentParser(description="Validate CSV files of scraped content via the validator API")
    parser.add_argument("files", nargs="+", help="CSV files to import")
    parser.add_argument("--api-url", default="http://localhost:8000", help="Base URL of the API")
    parser.add_argument("--api-key", default=None, help="Bearer token for the API")
    parser.add_argument("--output-dir", default=None, help="Directory to save exported CSVs")
    parser.add_argument("--status", default="all", choices=["all", "pending", "approved", "rejected"],
                        help="Status filter for the export")
    parser.add_argument("--include-review", action="store_true", help="Append review columns to the export")

    args = parser.parse_args()

    csv_files = [Path(p) for p in args.files]
    missing = [p for p in csv_files if not p.exists()]
    if missing:
        logger.error(f"Files not found: {', '.join(str(p) for p in missing)}")
        return

    output_dir = Path(args.output_dir) if args.output_dir else None
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    # Each import replaces the service's working set, so files go one at a time
    success_count = 0
    async with aiohttp.ClientSession() as session:
        for csv_file in csv_files:
            if await submit_file(
                session, csv_file, args.api_url, args.api_key,
                output_dir, args.status, args.include_review
            ):
                success_count += 1

    logger.info(f"Processing complete. Successfully processed {success_count}/{len(csv_files)} files.")

if __name__ == "__main__":
    asyncio.run(main())
