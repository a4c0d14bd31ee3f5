"""Shared fixtures for tldsplit tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from tldsplit.core.rules import RuleCompiler, RuleSet

SAMPLE_PSL = """\
// ===BEGIN ICANN DOMAINS===

// com : https://en.wikipedia.org/wiki/.com
com

// jp : https://en.wikipedia.org/wiki/.jp
jp
co.jp

// uk
uk
co.uk

// ck : https://en.wikipedia.org/wiki/.ck
*.ck
!www.ck

// hk
hk
公司.hk

// kawasaki.jp
*.kawasaki.jp
!city.kawasaki.jp

// ===END ICANN DOMAINS===
"""


@pytest.fixture
def sample_psl() -> str:
    return SAMPLE_PSL


@pytest.fixture
def ruleset() -> RuleSet:
    return RuleCompiler().compile(SAMPLE_PSL)


@pytest.fixture
def psl_file(tmp_path: Path) -> Path:
    path = tmp_path / "public_suffix_list.dat"
    path.write_text(SAMPLE_PSL, encoding="utf-8")
    return path


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
