"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the arqforge test suite.
"""

import os
import shutil
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from arqforge.container.resolver import ContainerResolver
from arqforge.project import Project

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (filesystem, multiple components)"
    )
    config.addinivalue_line("markers", "e2e: End-to-end tests driving the CLI")
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")


# =============================================================================
# Sample Documents
# =============================================================================

SAMPLE_POM = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0"
         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
         xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 http://maven.apache.org/xsd/maven-4.0.0.xsd">
  <modelVersion>4.0.0</modelVersion>
  <groupId>org.example</groupId>
  <artifactId>demo</artifactId>
  <version>1.0.0-SNAPSHOT</version>
  <!-- keep this comment -->
  <properties>
    <maven.compiler.release>17</maven.compiler.release>
  </properties>
  <dependencies>
    <dependency>
      <groupId>junit</groupId>
      <artifactId>junit</artifactId>
      <version>4.13.2</version>
      <scope>test</scope>
    </dependency>
  </dependencies>
  <build>
    <finalName>demo</finalName>
  </build>
</project>
"""

TEST_CATALOG = """
containers:
  - id: docker
    name: Docker
    group_id: org.arquillian.cube
    artifact_id: arquillian-cube-docker
    type: remote
    configurations:
      - name: serverUri
        default: "unix:///var/run/docker.sock"
      - name: dockerContainersFile

  - id: wildfly-managed
    name: WildFly Managed
    group_id: org.wildfly.arquillian
    artifact_id: wildfly-arquillian-container-managed
    type: managed
    download:
      group_id: org.wildfly
      artifact_id: wildfly-dist
    chameleon:
      name: wildfly
    configurations:
      - name: jbossHome
      - name: javaVmArguments
        default: "-Xmx512m"

  - id: glassfish-managed
    name: GlassFish Managed
    group_id: org.jboss.arquillian.container
    artifact_id: arquillian-glassfish-managed-3.1
    type: managed
    download:
      url: http://example.org/glassfish-3.1.2.2.zip

  - id: tomee-embedded
    name: TomEE Embedded
    group_id: org.apache.tomee
    artifact_id: arquillian-tomee-embedded
    type: embedded
    dependencies:
      - org.apache.tomee:tomee-embedded
"""


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ARQFORGE_ variables so the host environment cannot leak in."""
    for key in list(os.environ):
        if key.startswith("ARQFORGE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory that is cleaned up after the test.

    Yields:
        Path: Temporary directory path
    """
    temp_path = Path(tempfile.mkdtemp(prefix="arqforge-test-"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def write_pom(temp_dir: Path) -> Callable[[str], Path]:
    """Write pom.xml content into the temporary project directory."""

    def _write(content: str = SAMPLE_POM) -> Path:
        path = temp_dir / "pom.xml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project(temp_dir: Path, write_pom: Callable[[str], Path]) -> Project:
    """A project with the sample POM."""
    write_pom(SAMPLE_POM)
    return Project(temp_dir)


@pytest.fixture
def catalog_file(temp_dir: Path) -> Path:
    """A small container catalog under the project directory."""
    path = temp_dir / "catalog" / "containers.yaml"
    path.parent.mkdir()
    path.write_text(TEST_CATALOG, encoding="utf-8")
    return path


@pytest.fixture
def resolver(catalog_file: Path) -> ContainerResolver:
    """Container resolver over the test catalog."""
    return ContainerResolver(catalog_file)
