#!/usr/bin/env python3
"""
Seed a running organizer API with a few weeks of demo data.

Creates:
  - two classes, each with work items (some completed) and important dates
  - a handful of ideas and events
  - six weeks of a push / pull / legs split (Mon, Wed, Fri)
  - bike ideas and upcoming bike events

Usage examples:
  - Local dev server:
      python backend/scripts/seed_demo.py --base-url http://localhost:3000
  - Port-forwarded deployment:
      python backend/scripts/seed_demo.py --base-url http://localhost:8080 --weeks 8
"""
import argparse
import datetime as dt
import random

from app.client import OrganizerClient


SPLIT = [
    ("PUSH", [("Bench Press", 135), ("Overhead Press", 85), ("Dips", 0)]),
    ("PULL", [("Deadlift", 225), ("Barbell Row", 115), ("Pull-ups", 0)]),
    ("LEGS", [("Back Squat", 185), ("Romanian Deadlift", 135), ("Walking Lunge", 40)]),
]


def monday_of_week(d: dt.date) -> dt.date:
    return d - dt.timedelta(days=d.weekday())


def seed_classes(client: OrganizerClient, today: dt.date) -> int:
    n = 0
    for name, works, dates in [
        (
            "Algorithms",
            ["HW1: asymptotics", "HW2: divide and conquer", "Read CLRS ch. 15"],
            [("Midterm", 21), ("Project proposal due", 9)],
        ),
        (
            "Operating Systems",
            ["Lab 1: shell", "Lab 2: scheduler"],
            [("Lab 2 demo", 5), ("Final exam", 60)],
        ),
    ]:
        cls = client.create_class(name)
        for i, title in enumerate(works):
            item = client.create_work_item(cls["id"], title)
            # first item of each class already done
            if i == 0:
                client.update_work_item(item["id"], completed=True)
            n += 1
        for title, days_out in dates:
            client.create_important_date(
                cls["id"], title, (today + dt.timedelta(days=days_out)).isoformat()
            )
            n += 1
    return n + 2


def seed_ideas_and_events(client: OrganizerClient, today: dt.date) -> int:
    ideas = [
        "Build a reading tracker",
        "Try cooking one new recipe per week",
        "Write up notes from the systems seminar",
    ]
    for content in ideas:
        client.create_idea(content)
    events = [
        ("Dentist", 3, "09:30", None),
        ("Career fair", 12, "10:00", "Bring resumes"),
        ("Concert", 30, "19:30", None),
    ]
    for title, days_out, time, desc in events:
        client.create_event(title, (today + dt.timedelta(days=days_out)).isoformat(), time, desc)
    return len(ideas) + len(events)


def seed_workouts(client: OrganizerClient, today: dt.date, weeks: int) -> int:
    start = monday_of_week(today) - dt.timedelta(weeks=weeks - 1)
    n = 0
    for week in range(weeks):
        for offset, (wtype, lifts) in zip((0, 2, 4), SPLIT):
            day = start + dt.timedelta(weeks=week, days=offset)
            # Skip future days
            if day > today:
                continue
            exercises = [
                {
                    "name": name,
                    "sets": 3,
                    "reps": random.choice([5, 8, 10]),
                    "weight": float(base + 5 * week) if base else 0.0,
                }
                for name, base in lifts
            ]
            client.create_workout(wtype, day.isoformat(), exercises, notes="seed")
            n += 1
    return n


def seed_bike(client: OrganizerClient, today: dt.date) -> int:
    for content in ["Tubeless conversion", "Try a gravel route up the ridge"]:
        client.add_bike_idea(content)
    client.add_bike_event("Spring crit", (today + dt.timedelta(days=14)).isoformat(), "race")
    client.add_bike_event("Chain + cassette", (today + dt.timedelta(days=7)).isoformat(), "maintenance")
    return 4


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed the organizer API with demo data")
    ap.add_argument("--base-url", default="http://localhost:3000", help="Server root (without /api)")
    ap.add_argument("--weeks", type=int, default=6, help="Weeks of workouts to create")
    args = ap.parse_args()

    today = dt.date.today()
    with OrganizerClient(args.base_url) as client:
        total = seed_classes(client, today)
        total += seed_ideas_and_events(client, today)
        total += seed_workouts(client, today, args.weeks)
        total += seed_bike(client, today)

    print(f"Seeded {total} demo records")


if __name__ == "__main__":
    main()
