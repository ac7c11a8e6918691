"""
Outage Management Script
List, inspect and delete scheduled outages from the command line
"""
import sys
import os
from datetime import datetime, timezone

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from auth_outage.actor import StaticActor
from auth_outage.config import settings
from auth_outage.database import SessionLocal
from auth_outage.exceptions import InvalidArgument
from auth_outage.repositories.outage import OutageRepository
from auth_outage.store import RecordStore


def format_time(timestamp):
    if timestamp is None:
        return "-"
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime('%Y-%m-%d %H:%M UTC')


def list_outages(repo: OutageRepository):
    """List all outages"""
    outages = repo.get_all()

    print("\n" + "="*60)
    print("  SCHEDULED OUTAGES")
    print("="*60)

    if not outages:
        print("No outages found.")
    else:
        for outage in outages:
            print(f"\n#{outage.id}  {outage.title}")
            print(f"  {format_time(outage.starttime)} → {format_time(outage.stoptime)}")

    print("\n" + "="*60)
    print()


def show_outage(repo: OutageRepository, outage_id: int):
    """Show a single outage"""
    outage = repo.get_by_id(outage_id)
    if outage is None:
        print(f"❌ Outage #{outage_id} not found")
        return

    print(f"\nOutage #{outage.id}: {outage.title}")
    print(f"Warn from:     {format_time(outage.warntime)}")
    print(f"Starts:        {format_time(outage.starttime)}")
    print(f"Stops:         {format_time(outage.stoptime)}")
    print(f"Description:   {outage.description or '-'}")
    print(f"Created by:    {outage.createdby}")
    print(f"Modified by:   {outage.modifiedby} at {format_time(outage.lastmodified)}")
    print()


def delete_outage(repo: OutageRepository, outage_id: int):
    """Delete an outage"""
    repo.delete(outage_id)
    print(f"🗑️ Outage #{outage_id} deleted (if it existed)")


def main(argv=None):
    """Main function"""
    argv = sys.argv if argv is None else argv

    if len(argv) < 2:
        print("\n📋 Outage Management")
        print("\nUsage:")
        print("  python manage_outages.py list          - List all outages")
        print("  python manage_outages.py show <id>     - Show one outage")
        print("  python manage_outages.py delete <id>   - Delete an outage")
        print()
        return 0

    command = argv[1].lower()
    repo = OutageRepository(RecordStore(SessionLocal), StaticActor(settings.DEFAULT_ACTOR_ID))

    if command == "list":
        list_outages(repo)
        return 0

    if command in ("show", "delete"):
        if len(argv) < 3:
            print("❌ Error: Please provide an outage id")
            return 1
        try:
            outage_id = int(argv[2])
        except ValueError:
            print(f"❌ Error: '{argv[2]}' is not a valid outage id")
            return 1
        try:
            if command == "show":
                show_outage(repo, outage_id)
            else:
                delete_outage(repo, outage_id)
        except InvalidArgument:
            print(f"❌ Error: '{argv[2]}' is not a valid outage id")
            return 1
        return 0

    print(f"❌ Unknown command: {command}")
    print("Use 'list', 'show' or 'delete'")
    return 1


if __name__ == "__main__":
    sys.exit(main())
