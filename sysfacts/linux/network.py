from sysfacts.util import files, paths


def hostname() -> str:
    paths.require_linux()
    return files.read_file(paths.resolve(paths.KERNEL_HOSTNAME)).removesuffix("\n")
