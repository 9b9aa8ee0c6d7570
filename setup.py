from setuptools import find_packages, setup
import os


def has_libmagic_headers():
    """
    Check whether <magic.h> is available so that the compiled extension can
    be built. Without it, magikku loads libmagic dynamically at run time.
    """
    if os.environ.get("MAGIKKU_NO_EXTENSION"):
        return False
    include_dirs = ["/usr/include", "/usr/local/include",
                    "/opt/homebrew/include", "/opt/local/include"]
    if "LIBMAGIC_PREFIX" in os.environ:
        include_dirs.insert(0, os.path.join(os.environ["LIBMAGIC_PREFIX"],
                                            "include"))
    return any(os.path.isfile(os.path.join(include_dir, "magic.h"))
               for include_dir in include_dirs)


cffi_modules = []
if has_libmagic_headers():
    cffi_modules.append("magikku/libmagic/libmagic_build.py:ffibuilder")

setup(
    name="magikku",
    version="0.1.0",
    description="File type identification using libmagic",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"magikku.libmagic": ["cdef.h"]},
    python_requires=">=3.8",
    setup_requires=["cffi>=1.0.0"],
    cffi_modules=cffi_modules,
    install_requires=["cffi>=1.0.0", "pyyaml"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["magikku = magikku.cli:main"]},
)
