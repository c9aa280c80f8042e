#!/usr/bin/env python3
"""
Data migration script

Imports students exported from an earlier deployment into the database.

Usage:
    python migrate_data.py path/to/data.json

The file must hold an object with a "students" array. Each student needs
name, email and roll_number; user_id, password, role, clearance_status,
clearance_date and per-department documents are kept when present. Students
whose email, roll number or user id already exists are skipped, and records
that fail to import are counted as errors without stopping the run.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List
from clearance import create_app
from clearance.services import StudentService


def load_students(file_path: str) -> List[Dict[str, Any]]:
    """
    Read the students array from an export file

    Raises:
        ValueError: If the file does not contain a students array
    """
    data = json.loads(Path(file_path).read_text(encoding='utf-8'))
    students = data.get('students') if isinstance(data, dict) else None
    if not isinstance(students, list):
        raise ValueError("Invalid data format. Expected an array of students.")
    return students


def migrate_data(file_path: str, app=None) -> Dict[str, int]:
    """Import students from file_path and return the added/skipped/errors counts"""
    students = load_students(file_path)
    print(f"Found {len(students)} students to migrate.")

    app = app or create_app()
    with app.app_context():
        stats = StudentService.import_students(students)

    print("\nMigration Summary:")
    print(f"- Total students found: {len(students)}")
    print(f"- Successfully migrated: {stats['added']}")
    print(f"- Skipped (already exist): {stats['skipped']}")
    print(f"- Errors: {stats['errors']}")
    return stats


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Please provide the path to the JSON file.")
        print("Usage: python migrate_data.py path/to/data.json")
        sys.exit(1)

    try:
        migrate_data(sys.argv[1])
    except (OSError, ValueError) as e:
        print(f"Migration failed: {e}")
        sys.exit(1)
