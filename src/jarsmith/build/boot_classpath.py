"""
Boot classpath policy.

Maps the facts of one module variant to the name of the implicit base
library it compiles against. The same answer is needed twice: when the
module declares its dependencies and again when the resolved dependencies
are classified, so the policy must stay a pure function of its inputs.
"""

from ..config.module_descriptor import ModuleDescriptor

CORE_LIBRARY = "core-baselib"
CURRENT_STUBS = "stubs-current"
SYSTEM_CURRENT_STUBS = "system-stubs-current"

# sdk_version selectors with a dedicated stubs library
SDK_STUBS = {
    "current": CURRENT_STUBS,
    "system_current": SYSTEM_CURRENT_STUBS,
}


def resolve_boot_classpath(target_is_device: bool, dex: bool, sdk_version: str) -> str:
    """
    Resolve the boot library name for a module variant.

    Args:
        target_is_device: True for the device variant, False for host
        dex: Whether the module converts its output to dex
        sdk_version: SDK selector ('' for the platform, 'current',
            'system_current', or a numeric API level)

    Returns:
        Library name, or '' when the variant has no implicit boot library

    Example:
        >>> resolve_boot_classpath(True, True, "21")
        'sdk-v21'
    """
    if target_is_device:
        if sdk_version == "":
            return CORE_LIBRARY
        if sdk_version in SDK_STUBS:
            return SDK_STUBS[sdk_version]
        return f"sdk-v{sdk_version}"

    # Host modules only need the core library when they are dexed for testing
    return CORE_LIBRARY if dex else ""


def boot_library_name(descriptor: ModuleDescriptor, target_is_device: bool) -> str:
    """
    Get the boot library a descriptor actually depends on.

    Returns '' when no_standard_libraries suppresses the boot library.
    """
    if descriptor.no_standard_libraries:
        return ""
    return resolve_boot_classpath(target_is_device, descriptor.dex, descriptor.sdk_version)
