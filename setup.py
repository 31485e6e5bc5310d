from setuptools import setup

# The installer anchors on its own location, so it runs as
# tools/git_hook_installer.py from a checkout rather than as a console script.
setup(
    name="git-hook-installer",
    version="1.0.0",
    description="Installs a repository's shared .hooks/ scripts into .git/hooks/",
    python_requires=">=3.8",
    package_dir={"": "tools"},
    py_modules=["git_hook_installer"],
    install_requires=["rich"],
    extras_require={"test": ["pytest"]},
)
