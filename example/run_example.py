#!/usr/bin/env python3
"""
Demo driver replaying a fixed sequence of scheduling calls.

Two events are scheduled, then overridden several times, and the resulting
schedule is printed for a few windows and in full.
"""

import logging
import sys
import os

# Add parent directory to path so we can import scheduling
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from scheduling import Scheduler, SchedulerConfig, OverrideType, SchedulerError


def main():
    config = SchedulerConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logger = logging.getLogger(__name__)

    scheduler = Scheduler(config)

    # Event 1: employee 1, every day from March 1st to the end of the year
    scheduler.schedule_event(1, "2023-03-01", None, "08:00", 8)
    # Event 2: employee 8 for March only
    scheduler.schedule_event(8, "2023-03-01", "2023-03-30", "06:00", 7)

    overrides = [
        (1, OverrideType.TODAY_FORWARD, 4, "2023-03-14", "2023-05-30", None, None),
        (1, OverrideType.TODAY_FORWARD, 6, "2023-03-14", None, "10:00", None),
        (1, OverrideType.TODAY_FORWARD, 7, "2023-03-21", "2023-04-10", None, 6.5),
        (1, OverrideType.TODAY_FORWARD, 8, "2023-04-01", None, None, None),
        (1, OverrideType.TODAY_FORWARD, 4, "2023-04-01", "2023-04-15", "07:00", None),
        (2, OverrideType.TODAY_ONLY, 2, "2023-03-07", None, None, None),
        (2, OverrideType.TODAY_ONLY, 2, "2023-03-08", None, None, None),
        (2, OverrideType.TODAY_ONLY, 3, "2023-03-08", None, "05:00", 8),
        (2, OverrideType.TODAY_ONLY, 3, "2023-03-10", None, None, 9),
        (2, OverrideType.TODAY_ONLY, 3, "2023-03-14", None, "09:00", 4.5),
    ]

    for override in overrides:
        try:
            scheduler.override_event(*override)
        except SchedulerError as e:
            logger.warning("Override %s skipped: %s", override, e)

    scheduler.print_range("2023-02-04", 4)
    scheduler.print_range("2023-03-05", 6)
    scheduler.print_range("2023-02-27", 4)
    scheduler.print_range("2023-03-25", 10)

    scheduler.print_full()


if __name__ == '__main__':
    main()
