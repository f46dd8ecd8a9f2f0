"""
Tests for the Cube configuration catalog.
"""

import pytest

from arqforge.container.catalog import CubeConfiguration, Target, resolve


@pytest.mark.unit
class TestCubeCatalog:
    """Test CubeConfiguration metadata."""

    @pytest.mark.parametrize(
        "kind,artifact,qualifier,display,location_key",
        [
            (
                CubeConfiguration.DOCKER,
                "arquillian-cube-docker",
                "docker",
                "Docker",
                "dockerContainersFile",
            ),
            (
                CubeConfiguration.DOCKER_COMPOSE,
                "arquillian-cube-docker",
                "docker",
                "Docker Compose",
                "dockerContainersFile",
            ),
            (
                CubeConfiguration.KUBERNETES,
                "arquillian-cube-kubernetes",
                "kubernetes",
                "Kubernetes",
                "env.config.url",
            ),
            (
                CubeConfiguration.OPENSHIFT,
                "arquillian-cube-openshift",
                "openshift",
                "Openshift",
                "definitionsFile",
            ),
        ],
    )
    def test_resolve(self, kind, artifact, qualifier, display, location_key):
        """Test that each kind resolves to its static metadata."""
        descriptor = resolve(kind)

        assert descriptor.dependency.group_id == "org.arquillian.cube"
        assert descriptor.dependency.artifact_id == artifact
        assert descriptor.dependency.scope == "test"
        assert descriptor.qualifier == qualifier
        assert descriptor.type == display
        assert descriptor.location_key == location_key

    def test_closed_set(self):
        """Test the set of kinds."""
        assert [k.name for k in CubeConfiguration] == [
            "DOCKER",
            "DOCKER_COMPOSE",
            "KUBERNETES",
            "OPENSHIFT",
        ]

    def test_docker_kinds_share_target(self):
        """Test that Docker and Docker Compose use the same artifact."""
        assert CubeConfiguration.DOCKER.target is Target.DOCKER
        assert CubeConfiguration.DOCKER_COMPOSE.target is Target.DOCKER

    def test_from_type_ignores_case(self):
        """Test display type lookup."""
        assert CubeConfiguration.from_type("docker compose") is CubeConfiguration.DOCKER_COMPOSE
        assert CubeConfiguration.from_type("OPENSHIFT") is CubeConfiguration.OPENSHIFT

    def test_from_type_unknown(self):
        """Test that unknown display types raise ValueError."""
        with pytest.raises(ValueError):
            CubeConfiguration.from_type("Podman")

    def test_target_dependency_version(self):
        """Test Target.dependency with a version."""
        dep = Target.KUBERNETES.dependency("1.18.2")
        assert dep.coordinate == "org.arquillian.cube:arquillian-cube-kubernetes:1.18.2"
