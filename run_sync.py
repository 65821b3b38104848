"""
Run the board game sheet sync
"""
import asyncio
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

async def main():
    """Run the complete sync"""
    print("BOARD GAME SHEET SYNC")
    print("=" * 50)
    
    from boardgame_scraper.main import main as run_sync
    
    summary = await run_sync(sys.argv[1:])
    print(f"Processed: {summary.processed}  Skipped: {summary.skipped}  Failed: {summary.failed}")
    return summary

if __name__ == "__main__":
    summary = asyncio.run(main())
    sys.exit(1 if summary.failed else 0)
