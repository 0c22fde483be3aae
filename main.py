"""Main entry point for the daily commission queue."""

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path

from commission_queue.evaluation.generator import TaskGenerator
from commission_queue.evaluation.metrics import metrics
from commission_queue.evaluation.what_if import WhatIfAnalyzer
from commission_queue.repository import FileTaskStore, InMemoryTaskStore
from commission_queue.service import TodayQueueService
from commission_queue.utils.config import OptimizerConfig, get_default_config, load_config
from commission_queue.utils.datetime_utils import parse_date


def resolve_config(config_path: str) -> dict:
    """Load config file if present, otherwise fall back to defaults."""
    if config_path and Path(config_path).exists():
        return load_config(config_path)
    return get_default_config()


def resolve_date(date_str: str) -> datetime:
    if date_str:
        return parse_date(date_str)
    return datetime.now().replace(hour=9, minute=0, second=0, microsecond=0)


def open_store(args, config: dict, today: datetime) -> InMemoryTaskStore:
    """Task file if given, otherwise a seeded synthetic task set."""
    if args.tasks:
        return FileTaskStore(args.tasks)

    generator = TaskGenerator(seed=args.seed, config=config)
    tasks = generator.generate_task_stream(today)
    month = f"{today.year:04d}-{today.month:02d}"
    return InMemoryTaskStore(tasks, {month: {'target': '5000', 'earned': '1500'}})


def print_queue(result):
    """Print the ordered queue."""
    print(f"\n{'#':<4} {'Task':<12} {'Title':<28} {'Due':<12} {'Pri':<4} {'Hours':<6}")
    print("-" * 70)
    for i, task in enumerate(result.tasks, start=1):
        due = task.due_date.strftime('%Y-%m-%d') if task.due_date else 'none'
        print(f"{i:<4} {task.task_id:<12} {task.title[:28]:<28} {due:<12} {task.priority:<4} {task.effort_hours:<6}")

    print(f"\nTotal expected value (scaled commission + priority bonus): {result.total_expected_value:.2f}")
    print(f"Total effort: {result.total_effort_hours:.1f}h")
    if result.overload_detected:
        print("WARNING: mandatory tasks exceed today's capacity; no optional work scheduled")


def save_trace(trace, results_dir: Path):
    """Save JSON and human-readable trace."""
    results_dir.mkdir(exist_ok=True)

    trace_path = results_dir / f"trace_{trace.run_id}.json"
    with open(trace_path, 'w') as f:
        json.dump(trace.to_dict(), f, indent=2, default=str)

    log_path = results_dir / f"trace_{trace.run_id}.log"
    with open(log_path, 'w') as f:
        f.write(trace.to_human_readable())

    print(f"\nTrace saved to: {trace_path}")
    print(f"Human-readable log saved to: {log_path}")


def run_queue(args):
    """Build and print today's queue."""
    config = resolve_config(args.config)
    optimizer_config = OptimizerConfig.from_dict(config)
    today = resolve_date(args.date)
    store = open_store(args, config, today)

    service = TodayQueueService(store, store, args.daily_hours, optimizer_config)
    queue = service.load_today_queue(today)

    print(f"\nQueue for {today.date()}")
    print_queue(queue.result)
    print(f"\nMetrics: {json.dumps(queue.metrics.to_dict())}")

    if args.trace:
        save_trace(queue.result.trace, Path(args.output))

    return queue


def run_what_if(args):
    """Compare today's queue with one where a task is adjusted."""
    if not args.task_id:
        raise ValueError("what-if requires --task-id")

    config = resolve_config(args.config)
    today = resolve_date(args.date)
    store = open_store(args, config, today)

    service = TodayQueueService(store, store, args.daily_hours, OptimizerConfig.from_dict(config))
    report = service.what_if(
        args.task_id,
        today,
        probability=args.probability,
        effort_hours=args.effort_hours,
    )

    summary = WhatIfAnalyzer().generate_report(report)

    print_queue(report.modified)
    print(json.dumps(summary, indent=2, default=str))

    return summary


def run_metrics(args):
    """Print performance metrics for all open tasks."""
    config = resolve_config(args.config)
    today = resolve_date(args.date)
    store = open_store(args, config, today)

    result = metrics(store.fetch_open_tasks(), today, OptimizerConfig.from_dict(config))
    print(json.dumps(result.to_dict(), indent=2))

    return result


def run_generate(args):
    """Write a synthetic task file."""
    config = resolve_config(args.config)
    today = resolve_date(args.date)
    generator = TaskGenerator(seed=args.seed, config=config)
    tasks = generator.generate_task_stream(today)

    results_dir = Path(args.output)
    results_dir.mkdir(exist_ok=True)
    out_path = results_dir / "generated_tasks.json"

    month = f"{today.year:04d}-{today.month:02d}"
    with open(out_path, 'w') as f:
        json.dump({
            'targets': {month: {'target': '5000', 'earned': '1500'}},
            'tasks': [task.to_dict() for task in tasks],
        }, f, indent=2)

    print(f"Generated {len(tasks)} tasks")
    print(f"Tasks saved to: {out_path}")

    return out_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Daily commission-weighted task queue"
    )
    parser.add_argument(
        'command',
        choices=['queue', 'what-if', 'metrics', 'generate-tasks'],
        help='Command to run'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument('--tasks', type=str, help='YAML/JSON task file (default: synthetic tasks)')
    parser.add_argument('--date', type=str, help='Reference date, ISO format (default: today)')
    parser.add_argument('--daily-hours', type=float, default=None, help='Effort budget for the day')
    parser.add_argument('--task-id', type=str, help='Task to adjust for what-if')
    parser.add_argument('--probability', type=float, help='What-if close probability')
    parser.add_argument('--effort-hours', type=float, help='What-if effort hours')
    parser.add_argument('--seed', type=int, default=42, help='Seed for synthetic tasks')
    parser.add_argument('--output', type=str, default='results', help='Output directory')
    parser.add_argument('--trace', action='store_true', help='Save the allocation trace')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose logging')
    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if args.command == 'queue':
        return run_queue(args)
    elif args.command == 'what-if':
        return run_what_if(args)
    elif args.command == 'metrics':
        return run_metrics(args)
    elif args.command == 'generate-tasks':
        return run_generate(args)


if __name__ == "__main__":
    main()
