from sysfacts.util import files, paths


def kernel_version() -> str:
    """
    Return the running kernel release, e.g. "6.8.0-45-generic".
    """
    paths.require_linux()
    return files.read_file(paths.resolve(paths.KERNEL_OSRELEASE)).removesuffix("\n")


def arch() -> str:
    """
    Return the architecture the kernel reports, e.g. "x86_64" or "aarch64".
    """
    paths.require_linux()
    return files.read_file(paths.resolve(paths.KERNEL_ARCH)).removesuffix("\n")
