"""
Maven profile management for Arquillian containers.

Every container gets its own POM profile. The profile activates the
container adapter by running surefire with ``arquillian.launch`` set to the
profile id, and may carry the adapter's dependencies and an execution that
downloads the container distribution before tests run.

Profile ids are compared after normalization, so ``ARQ-WildFly-Managed``
and ``arquillian-wildfly-managed`` name the same profile.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable

from arqforge.exceptions import ContainerNotFoundError, ProfileNotFoundError
from arqforge.maven.facet import MavenFacet
from arqforge.maven.model import (
    Activation,
    BuildBase,
    Dependency,
    Model,
    Plugin,
    PluginExecution,
    Profile,
)
from arqforge.maven.xml import parse_template, sub_element
from arqforge.project import Project

from .model import Container
from .resolver import ContainerResolver

DEFAULT_SUREFIRE_VERSION = "2.14.1"
OUTPUT_DIRECTORY = "${project.basedir}/target/"

DOWNLOAD_PLUGIN = Dependency.from_coordinate(
    "com.googlecode.maven-download-plugin:download-maven-plugin"
)
DEPENDENCY_PLUGIN = Dependency.from_coordinate(
    "org.apache.maven.plugins:maven-dependency-plugin"
)

EXECUTION_ID = "unpack"
EXECUTION_PHASE = "process-test-classes"

SUREFIRE_CONFIGURATION = """\
<configuration>
    <systemPropertyVariables>
        <arquillian.launch>{profile_id}</arquillian.launch>
    </systemPropertyVariables>
</configuration>"""

SUREFIRE_CHAMELEON_CONFIGURATION = """\
<configuration>
    <systemPropertyVariables>
        <arquillian.launch>{profile_id}</arquillian.launch>
        <chameleon.target>{target}</chameleon.target>
    </systemPropertyVariables>
</configuration>"""

_SHORT_PREFIX = "arq-"
_LONG_PREFIX = "arquillian-"


def normalize_profile_id(profile_id: str) -> str:
    """Lower-case a profile id and expand a leading ``arq-`` to ``arquillian-``."""
    normalized = profile_id.lower()
    if normalized.startswith(_SHORT_PREFIX):
        normalized = _LONG_PREFIX + normalized[len(_SHORT_PREFIX) :]
    return normalized


def _find_profile_by_id(profile_id: str, model: Model) -> Profile | None:
    wanted = normalize_profile_id(profile_id)
    for profile in model.profiles:
        if normalize_profile_id(profile.id) == wanted:
            return profile
    return None


class ProfileManager:
    """
    Reads and edits the container profiles of a project's POM.

    Each mutating call reads the POM from the project's Maven facet, edits
    it in memory and writes the whole document back.

    Example:
        manager = ProfileManager(ContainerResolver(), lg=lg)
        container = manager.get_container("arq-wildfly-managed")
        manager.add_profile(project, container, activated_by_default=True)
        manager.add_container_configuration(container, project, "10.1.0.Final")
    """

    def __init__(
        self,
        container_resolver: ContainerResolver,
        surefire_version: str = DEFAULT_SUREFIRE_VERSION,
        lg: logging.Logger | None = None,
    ) -> None:
        self._resolver = container_resolver
        self._surefire_version = surefire_version
        self._lg = lg or logging.getLogger(__name__)

    def get_arquillian_profiles(self, project: Project) -> list[str]:
        """Ids of all POM profiles, sorted and without duplicates."""
        model = project.get_facet(MavenFacet).get_model()
        return sorted({profile.id for profile in model.profiles})

    def is_any_profile_registered(self, project: Project) -> bool:
        return bool(project.get_facet(MavenFacet).get_model().profiles)

    def get_container(self, profile_id: str) -> Container:
        """
        Find the cataloged container a profile id belongs to.

        Raises:
            ContainerNotFoundError: If no container matches
        """
        wanted = normalize_profile_id(profile_id)
        for container in self._resolver.get_containers():
            if normalize_profile_id(container.profile_id) == wanted:
                return container
        raise ContainerNotFoundError(profile_id)

    def add_profile(
        self,
        project: Project,
        container: Container,
        activated_by_default: bool,
        dependencies: Iterable[Dependency] = (),
    ) -> None:
        """
        Add (or replace) the container's profile.

        The profile runs surefire with ``arquillian.launch`` set to the
        container's profile id and carries ``dependencies``. A profile already
        present under an equivalent id is replaced and its id kept.
        """
        profile = self._create_profile(container, activated_by_default)
        profile.build = self._build_base(container.profile_id)
        for dependency in dependencies:
            profile.add_dependency(dependency.with_version(None))
        self._replace_profile(project, container, profile)

    def add_chameleon_profile(
        self,
        project: Project,
        container: Container,
        chameleon_target_version: str,
        activated_by_default: bool,
    ) -> None:
        """
        Add (or replace) the container's profile, launched through Chameleon.

        Surefire additionally gets ``chameleon.target`` computed from the
        container's Chameleon mapping and the given version.

        Raises:
            ContainerError: If the container has no Chameleon mapping
        """
        profile = self._create_profile(container, activated_by_default)
        profile.build = self._build_base(
            container.profile_id, container.chameleon_target(chameleon_target_version)
        )
        self._replace_profile(project, container, profile)

    def add_container_configuration(
        self, container: Container, project: Project, version: str
    ) -> None:
        """
        Add a plugin execution that fetches the container distribution.

        A download URL produces a ``wget`` execution of the download plugin;
        a distribution artifact produces an ``unpack`` execution of the
        dependency plugin for ``version``. Both unpack into the build
        directory during ``process-test-classes``.

        Raises:
            ProfileNotFoundError: If the POM has no profile for the container
        """
        facet = project.get_facet(MavenFacet)
        model = facet.get_model()

        profile = _find_profile_by_id(container.profile_id, model)
        if profile is None:
            profile = _find_profile_by_id(container.id, model)
        if profile is None:
            raise ProfileNotFoundError(container.id, container.profile_id)

        plugin = self._download_plugin(container, version)
        if profile.build is None:
            profile.build = BuildBase()
        profile.build.add_plugin(plugin)

        model.remove_profile(profile)
        model.add_profile(profile)
        facet.set_model(model)
        self._lg.info(
            "container configuration added",
            extra={"profile": profile.id, "plugin": plugin.artifact_id},
        )

    def _download_plugin(self, container: Container, version: str) -> Plugin:
        download = container.download
        if download is not None and download.url:
            configuration = ET.Element("configuration")
            sub_element(configuration, "url", download.url)
            sub_element(configuration, "unpack", "true")
            sub_element(configuration, "overwrite", "false")
            sub_element(configuration, "outputDirectory", OUTPUT_DIRECTORY)
            return Plugin(
                DOWNLOAD_PLUGIN.group_id,
                DOWNLOAD_PLUGIN.artifact_id,
                executions=[self._execution(configuration, "wget")],
            )

        if download is not None and download.is_artifact:
            configuration = ET.Element("configuration")
            item = sub_element(sub_element(configuration, "artifactItems"), "artifactItem")
            sub_element(item, "groupId", download.group_id)
            sub_element(item, "artifactId", download.artifact_id)
            sub_element(item, "version", version)
            sub_element(item, "type", "zip")
            sub_element(item, "overWrite", "false")
            sub_element(item, "outputDirectory", OUTPUT_DIRECTORY)
            return Plugin(
                DEPENDENCY_PLUGIN.group_id,
                DEPENDENCY_PLUGIN.artifact_id,
                executions=[self._execution(configuration, "unpack")],
            )

        self._lg.warning(
            "container has no download metadata, adding empty plugin entry",
            extra={"container": container.id},
        )
        return Plugin()

    @staticmethod
    def _execution(configuration: ET.Element, goal: str) -> PluginExecution:
        return PluginExecution(
            id=EXECUTION_ID,
            phase=EXECUTION_PHASE,
            goals=[goal],
            configuration=configuration,
        )

    @staticmethod
    def _create_profile(container: Container, activated_by_default: bool) -> Profile:
        profile = Profile(container.profile_id)
        if activated_by_default:
            profile.activation = Activation(active_by_default=True)
        return profile

    def _build_base(self, profile_id: str, chameleon_target: str | None = None) -> BuildBase:
        if chameleon_target is None:
            configuration = parse_template(SUREFIRE_CONFIGURATION, profile_id=profile_id)
        else:
            configuration = parse_template(
                SUREFIRE_CHAMELEON_CONFIGURATION,
                profile_id=profile_id,
                target=chameleon_target,
            )
        surefire = Plugin(
            artifact_id="maven-surefire-plugin",
            version=self._surefire_version,
            configuration=configuration,
        )
        return BuildBase(plugins=[surefire])

    def _replace_profile(
        self, project: Project, container: Container, profile: Profile
    ) -> None:
        facet = project.get_facet(MavenFacet)
        model = facet.get_model()

        existing = _find_profile_by_id(container.profile_id, model)
        if existing is not None:
            profile.id = existing.id
            model.remove_profile(existing)

        model.add_profile(profile)
        facet.set_model(model)
        self._lg.info(
            "profile added",
            extra={"profile": profile.id, "replaced": existing is not None},
        )
