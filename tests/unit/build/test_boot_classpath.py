"""Tests for the boot classpath policy."""

import pytest

from jarsmith.build.boot_classpath import (
    CORE_LIBRARY,
    boot_library_name,
    resolve_boot_classpath,
)
from jarsmith.build.dependency_collector import DependencyCollector
from jarsmith.build.dependency_declarer import declare_dependencies
from jarsmith.config.module_descriptor import ModuleDescriptor


class TestResolveBootClasspath:
    """Test the policy table."""

    @pytest.mark.parametrize("dex", [True, False])
    def test_device_platform_sdk(self, dex):
        """Device modules without sdk_version use the core library."""
        assert resolve_boot_classpath(True, dex, "") == "core-baselib"

    def test_device_current(self):
        """sdk_version=current selects the current stubs."""
        assert resolve_boot_classpath(True, True, "current") == "stubs-current"

    def test_device_system_current(self):
        """sdk_version=system_current selects the system stubs."""
        assert resolve_boot_classpath(True, True, "system_current") == "system-stubs-current"

    @pytest.mark.parametrize("version", ["19", "21", "23"])
    def test_device_numbered_sdk(self, version):
        """Numbered sdk versions select the prebuilt sdk library."""
        assert resolve_boot_classpath(True, False, version) == f"sdk-v{version}"

    def test_host_with_dex(self):
        """Host modules that are dexed still need the core library."""
        assert resolve_boot_classpath(False, True, "") == CORE_LIBRARY
        assert resolve_boot_classpath(False, True, "current") == CORE_LIBRARY

    def test_host_without_dex(self):
        """Plain host modules have no boot library."""
        assert resolve_boot_classpath(False, False, "") == ""
        assert resolve_boot_classpath(False, False, "21") == ""


class TestBootLibraryName:
    """Test the descriptor-level helper."""

    def test_suppressed_by_no_standard_libraries(self):
        """no_standard_libraries removes the boot library."""
        descriptor = ModuleDescriptor(no_standard_libraries=True, dex=True)
        assert boot_library_name(descriptor, True) == ""

    def test_uses_descriptor_fields(self):
        """sdk_version and dex come from the descriptor."""
        descriptor = ModuleDescriptor(sdk_version="current")
        assert boot_library_name(descriptor, True) == "stubs-current"
        assert boot_library_name(ModuleDescriptor(dex=True), False) == CORE_LIBRARY

    @pytest.mark.parametrize("device", [True, False])
    @pytest.mark.parametrize("dex", [True, False])
    @pytest.mark.parametrize("sdk_version", ["", "current", "system_current", "22"])
    def test_declaration_and_collection_agree(self, device, dex, sdk_version):
        """The name declared first is the one collection treats as boot."""
        descriptor = ModuleDescriptor(dex=dex, sdk_version=sdk_version)

        declared = declare_dependencies(descriptor, device)
        collector = DependencyCollector(descriptor, device)

        if collector.boot_name:
            assert declared == [collector.boot_name]
        else:
            assert declared == []
