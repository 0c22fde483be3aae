"""
Tests for the command line entry point.
"""

import json

import pytest

import main


def run(tmp_path, *argv):
    return main.main([
        *argv,
        '--config', str(tmp_path / 'absent.yaml'),
        '--output', str(tmp_path / 'results'),
    ])


class TestCli:
    """Test cases for CLI commands."""

    def test_queue(self, tmp_path, task_file, capsys):
        queue = run(tmp_path, 'queue', '--tasks', str(task_file), '--date', '2026-10-19T09:00')

        out = capsys.readouterr().out
        assert queue.result.task_ids == ["M", "Y"]
        assert "Queue for 2026-10-19" in out
        assert "Total effort: 7.0h" in out

    def test_queue_trace(self, tmp_path, task_file):
        queue = run(tmp_path, 'queue', '--tasks', str(task_file), '--date', '2026-10-19', '--trace')

        run_id = queue.result.trace.run_id
        trace_path = tmp_path / 'results' / f"trace_{run_id}.json"
        assert trace_path.exists()
        assert json.loads(trace_path.read_text())['run_id'] == run_id
        assert (tmp_path / 'results' / f"trace_{run_id}.log").exists()

    def test_overload_warning(self, tmp_path, task_file, capsys):
        run(tmp_path, 'queue', '--tasks', str(task_file), '--date', '2026-10-19', '--daily-hours', '1')

        assert "WARNING: mandatory tasks exceed" in capsys.readouterr().out

    def test_what_if(self, tmp_path, task_file):
        summary = run(tmp_path, 'what-if', '--tasks', str(task_file), '--date', '2026-10-19T09:00',
                      '--task-id', 'Y', '--effort-hours', '6')

        assert summary['summary']['removed'] == 1
        assert summary['summary']['added'] == 1

    def test_what_if_requires_task(self, tmp_path, task_file):
        with pytest.raises(ValueError):
            run(tmp_path, 'what-if', '--tasks', str(task_file))

    def test_metrics(self, tmp_path, task_file, capsys):
        result = run(tmp_path, 'metrics', '--tasks', str(task_file))

        assert result.efficiency == 0.0
        assert '"total_expected_commission"' in capsys.readouterr().out

    def test_generate_then_queue(self, tmp_path):
        out_path = run(tmp_path, 'generate-tasks', '--date', '2026-10-19', '--seed', '3')

        data = json.loads(out_path.read_text())
        assert len(data['tasks']) == 12

        queue = run(tmp_path, 'queue', '--tasks', str(out_path), '--date', '2026-10-19')
        assert queue.result.total_effort_hours <= 8.0 or queue.is_overloaded

    def test_synthetic_queue(self, tmp_path):
        queue = run(tmp_path, 'queue', '--date', '2026-10-19')

        assert len(queue.result.tasks) > 0

    def test_queue_untitled_task(self, tmp_path, capsys):
        path = tmp_path / "tasks.yaml"
        path.write_text("tasks:\n  - id: bare\n    title: null\n    effort_hours: 1.0\n")

        queue = run(tmp_path, 'queue', '--tasks', str(path), '--date', '2026-10-19')

        assert queue.result.task_ids == ["bare"]
        assert "bare" in capsys.readouterr().out
