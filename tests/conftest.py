"""
Shared pytest fixtures for the gig test suite.

This module provides:
- Sample Go source fixtures (mixed imports, aliases, comments, no imports)
- Temporary Go module fixtures with a go.mod
- Default formatter configurations
- Helper functions for writing Go files

Go snippets are written with four-space indentation and converted to tabs by
go_source(), matching the tab-indented import blocks gig emits.

Fixture Naming Convention:
- sample_* : Fixtures that provide sample content (bytes)
- tmp_*    : Fixtures that create temporary directories/files
- config_* : Fixtures that provide FormatterConfig instances
"""
from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from gig.config import FormatterConfig

PROJECT_MODULE = "github.com/test/project"
ORG_PREFIX = "github.com/myorg"


# =============================================================================
# Helper Functions
# =============================================================================

def go_source(text: str) -> bytes:
    """
    Turn an indented Go snippet into file content.

    Removes the common indentation and the leading newline, converts every
    four spaces into a tab and encodes the result.
    """
    return textwrap.dedent(text).lstrip("\n").replace("    ", "\t").encode("utf-8")


def write_go_file(directory: Path, name: str, content: bytes) -> Path:
    """
    Write a Go file, creating parent directories as needed.

    Returns
    -------
    Path
        Path to the created file.
    """
    file_path = directory / name
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_bytes(content)
    return file_path


@pytest.fixture
def go() -> Callable[[str], bytes]:
    """Provide go_source() to tests."""
    return go_source


# =============================================================================
# Sample Go Code Fixtures
# =============================================================================

@pytest.fixture
def sample_mixed_imports() -> bytes:
    """
    Go file whose imports span every group, in no particular order.

    Contains:
    - Standard library (fmt, strings)
    - Third-party (github.com/external/lib)
    - Organization (github.com/myorg/project1)
    - Current project (github.com/test/project/internal)
    """
    return go_source('''
        package main

        import (
            "github.com/external/lib"
            "fmt"
            "github.com/test/project/internal"
            "strings"
            "github.com/myorg/project1"
        )

        func main() {
            fmt.Println(strings.ToUpper(lib.Name), internal.Value, project1.Value)
        }
    ''')


@pytest.fixture
def sample_mixed_imports_organized() -> bytes:
    """The expected result of organizing sample_mixed_imports."""
    return go_source('''
        package main

        import (
            "fmt"
            "strings"

            "github.com/external/lib"

            "github.com/myorg/project1"

            "github.com/test/project/internal"
        )

        func main() {
            fmt.Println(strings.ToUpper(lib.Name), internal.Value, project1.Value)
        }
    ''')


@pytest.fixture
def sample_no_imports() -> bytes:
    """Go file without any import declaration."""
    return go_source('''
        // Package shapes has no dependencies.
        package shapes

        type Square struct {
            Side int
        }

        func (s Square) Area() int {
            return s.Side * s.Side
        }
    ''')


@pytest.fixture
def sample_aliases_and_comments() -> bytes:
    """
    Go file using renamed, blank and dot imports with trailing comments.
    """
    return go_source('''
        package server

        import (
            "net/http"
            _ "net/http/pprof" // debug endpoints
            . "github.com/onsi/gomega"
            log "github.com/sirupsen/logrus" // structured logging
            "context"
        )

        func Serve(ctx context.Context) error {
            log.Info("serving")
            Expect(ctx).NotTo(BeNil())
            return http.ListenAndServe(":8080", nil)
        }
    ''')


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def config_default() -> FormatterConfig:
    """Configuration with one organization and an explicit project."""
    return FormatterConfig(org_prefixes=(ORG_PREFIX,), current_project=PROJECT_MODULE)


@pytest.fixture
def config_in_place() -> FormatterConfig:
    """Like config_default, but rewriting files in place."""
    return FormatterConfig(
        org_prefixes=(ORG_PREFIX,),
        current_project=PROJECT_MODULE,
        in_place=True,
    )


# =============================================================================
# Temporary Directory Fixtures
# =============================================================================

@pytest.fixture
def tmp_go_module(tmp_path: Path, sample_mixed_imports: bytes, sample_no_imports: bytes) -> Path:
    """
    Create a temporary Go module.

    Structure:
    tmp_path/
    ├── go.mod                 (module github.com/test/project)
    ├── main.go                (sample_mixed_imports)
    ├── shapes/
    │   └── shapes.go          (sample_no_imports)
    ├── vendor/
    │   └── dep/dep.go         (skipped by directory walks)
    └── .hidden/
        └── hidden.go          (skipped by directory walks)

    Returns the module root (tmp_path).
    """
    (tmp_path / "go.mod").write_text(f"module {PROJECT_MODULE}\n\ngo 1.21\n")
    write_go_file(tmp_path, "main.go", sample_mixed_imports)
    write_go_file(tmp_path, "shapes/shapes.go", sample_no_imports)
    write_go_file(tmp_path, "vendor/dep/dep.go", b'package dep\n\nimport "os"\n')
    write_go_file(tmp_path, ".hidden/hidden.go", b'package hidden\n\nimport "os"\n')
    return tmp_path


@pytest.fixture
def tmp_go_file(tmp_go_module: Path) -> Path:
    """The main.go file of tmp_go_module."""
    return tmp_go_module / "main.go"
