[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sipflow"
version = "1.8.2"
description = "Settings, key bindings, resource-file options, SDP media formats, RTCP report parsing and payload match expressions for SIP monitoring"
requires-python = ">=3.10"
dependencies = []
keywords = ["sip", "sdp", "rtp", "rtcp", "voip", "monitoring", "keybindings", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
    "Topic :: Communications :: Telephony",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sipflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
