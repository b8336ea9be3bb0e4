# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/scaffold/workflows.py

"""
GitHub Actions workflows for Rust projects.

Libraries get main.yml and pr.yml; binaries also get release.yml, which
builds a release binary per platform and attaches them to a GitHub release.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import BaseLoader, Environment
from loguru import logger


@dataclass(frozen=True)
class Platform:
    """A CI runner and the release target built on it."""
    key: str
    runner: str
    target: str
    title: str
    suffix: str
    exe: str = ""
    strip: bool = False

    @property
    def test_job(self) -> str:
        return f"test-{self.key}"

    @property
    def build_job(self) -> str:
        return f"build-{self.key}"

    @property
    def build_title(self) -> str:
        return f"Build release ({self.title})"


LINUX = Platform(
    key="linux",
    runner="ubuntu-latest",
    target="x86_64-unknown-linux-gnu",
    title="Linux",
    suffix="linux-x86_64",
    strip=True,
)
WINDOWS = Platform(
    key="windows",
    runner="windows-latest",
    target="x86_64-pc-windows-msvc",
    title="Windows",
    suffix="windows-x86_64",
    exe=".exe",
)
OSX = Platform(
    key="osx",
    runner="macos-latest",
    target="x86_64-apple-darwin",
    title="OSX",
    suffix="osx-x86_64",
)


def select_platforms(no_windows: bool = False, no_osx: bool = False) -> list[Platform]:
    """Linux first, then Windows and OSX unless excluded."""
    platforms = [LINUX]
    if not no_windows:
        platforms.append(WINDOWS)
    if not no_osx:
        platforms.append(OSX)
    return platforms


class WorkflowTemplates:
    """Jinja2 templates for the generated workflow files."""

    MAIN_TEMPLATE = """name: main

on:
  push:
    branches: [ main ]
  schedule:
    - cron: 0 0 1 * *

env:
  CARGO_TERM_COLOR: always

jobs:
{% for job in jobs %}
  {{ job.name }}:
    runs-on: {{ job.platform.runner }}
    steps:
    - uses: actions/checkout@v4
    - name: Build
      run: cargo build --workspace --all-features --verbose
    - name: Run tests
      run: cargo test --workspace --all-features --verbose

{% endfor %}
"""

    PR_TEMPLATE = """name: PR

on:
  pull_request:
    branches: [ main ]

env:
  CARGO_TERM_COLOR: always

jobs:
{% for job in jobs %}
  {{ job.name }}:
    runs-on: {{ job.platform.runner }}
    steps:
    - uses: actions/checkout@v4
{% if job.lint %}
    - name: Check formatting
      run: cargo fmt --all --check
    - name: Clippy
      run: cargo clippy --all --tests -- -D warnings
{% endif %}
    - name: Build
      run: cargo build --workspace --all-features --verbose
    - name: Run tests
      run: cargo test --workspace --all-features --verbose

{% endfor %}
"""

    RELEASE_TEMPLATE = """name: Release

on:
  push:
    tags:
      - 'v*'

jobs:
{% for platform in platforms %}
  {{ platform.build_job }}:
    runs-on: {{ platform.runner }}
    steps:
    - uses: actions/checkout@v4
    - name: Install target
      run: rustup target add {{ platform.target }}
    - name: {{ platform.build_title }}
      run: cargo build --release --target {{ platform.target }}
{% if platform.strip %}
    - name: Strip binary
      run: strip target/{{ platform.target }}/release/{{ project_name }}
{% endif %}
    - name: Upload artifact
      uses: actions/upload-artifact@v4
      with:
        name: {{ platform.build_job }}
        path: target/{{ platform.target }}/release/{{ project_name }}{{ platform.exe }}

{% endfor %}
  release:
    needs: [{{ platforms | map(attribute='build_job') | join(', ') }}]
    runs-on: ubuntu-latest
    permissions:
      contents: write
    steps:
{% for platform in platforms %}
    - name: Download {{ platform.build_job }}
      uses: actions/download-artifact@v4
      with:
        name: {{ platform.build_job }}
        path: {{ platform.build_job }}
    - name: Rename {{ platform.build_job }}
      run: mv {{ platform.build_job }}/{{ project_name }}{{ platform.exe }} {{ platform.build_job }}/{{ project_name }}-{{ platform.suffix }}{{ platform.exe }}
{% endfor %}
    - name: Release
      uses: softprops/action-gh-release@v2
      with:
        files: |
{% for platform in platforms %}
          {{ platform.build_job }}/*
{% endfor %}
"""

    def __init__(self):
        self.env = Environment(loader=BaseLoader())
        self.env.trim_blocks = True
        self.env.lstrip_blocks = True

    def render(self, template_string: str, context: dict[str, Any]) -> str:
        """Render a workflow, ending it with exactly one newline."""
        rendered = self.env.from_string(template_string).render(**context)
        return rendered.rstrip() + "\n"


_templates = WorkflowTemplates()


def _test_jobs(platforms: list[Platform], linux_name: str, lint: bool) -> list[dict[str, Any]]:
    jobs = []
    for platform in platforms:
        if platform is LINUX:
            jobs.append({"name": linux_name, "platform": platform, "lint": lint})
        else:
            jobs.append({"name": platform.test_job, "platform": platform, "lint": False})
    return jobs


def generate_main_workflow(no_windows: bool = False, no_osx: bool = False) -> str:
    platforms = select_platforms(no_windows, no_osx)
    return _templates.render(
        WorkflowTemplates.MAIN_TEMPLATE,
        {"jobs": _test_jobs(platforms, linux_name="test", lint=False)},
    )


def generate_pr_workflow(no_windows: bool = False, no_osx: bool = False) -> str:
    platforms = select_platforms(no_windows, no_osx)
    return _templates.render(
        WorkflowTemplates.PR_TEMPLATE,
        {"jobs": _test_jobs(platforms, linux_name="test-and-lint", lint=True)},
    )


def generate_release_workflow(project_name: str, no_windows: bool = False, no_osx: bool = False) -> str:
    return _templates.render(
        WorkflowTemplates.RELEASE_TEMPLATE,
        {"platforms": select_platforms(no_windows, no_osx), "project_name": project_name},
    )


def create_workflows_dir(project_dir: Path) -> Path:
    workflows_dir = project_dir / ".github" / "workflows"
    workflows_dir.mkdir(parents=True, exist_ok=True)
    return workflows_dir


def _write_workflows(project_dir: Path, workflows: dict[str, str]) -> list[Path]:
    workflows_dir = create_workflows_dir(project_dir)
    written = []
    for filename, content in workflows.items():
        path = workflows_dir / filename
        path.write_text(content, encoding="utf-8")
        logger.info(f"Wrote {path}")
        written.append(path)
    return written


def add_lib_ci(project_dir: Path, no_windows: bool = False, no_osx: bool = False) -> list[Path]:
    """Write main.yml and pr.yml for a library."""
    return _write_workflows(project_dir, {
        "main.yml": generate_main_workflow(no_windows, no_osx),
        "pr.yml": generate_pr_workflow(no_windows, no_osx),
    })


def add_bin_ci(project_dir: Path, project_name: str, no_windows: bool = False, no_osx: bool = False) -> list[Path]:
    """Write main.yml, pr.yml and release.yml for a binary."""
    return _write_workflows(project_dir, {
        "main.yml": generate_main_workflow(no_windows, no_osx),
        "pr.yml": generate_pr_workflow(no_windows, no_osx),
        "release.yml": generate_release_workflow(project_name, no_windows, no_osx),
    })
