"""Mock factories shared by the apprunner tests.

Process responses are keyed by a substring of the joined command line, e.g.
``'adb devices'`` or ``'am force-stop'``. A response is ``(returncode, stdout,
stderr)``, an exception instance to raise, or a list of those consumed one per
call (the last one repeats).
"""
from unittest.mock import Mock

SDK_ROOT = "/opt/android-sdk"
ADB = f"{SDK_ROOT}/platform-tools/adb"
EMULATOR = f"{SDK_ROOT}/emulator/emulator"
PROJECT_DIR = "platform/android"

DEVICES_HEADER = "List of devices attached\n"
NO_DEVICES = DEVICES_HEADER + "\n"
ONE_DEVICE = DEVICES_HEADER + "emulator-5554\tdevice\n\n"
TWO_DEVICES = DEVICES_HEADER + "emulator-5554\tdevice\nR58M123ABC\tdevice\n\n"

LAUNCHER_FILTER = """
            <intent-filter>
                <action android:name="android.intent.action.MAIN" />
                <category android:name="android.intent.category.LAUNCHER" />
            </intent-filter>"""


def make_manifest(package="com.example.app", activities=None):
    """Build AndroidManifest.xml text.

    Args:
        package: Root package attribute (None omits it)
        activities: List of (name, inner_xml) pairs
    """
    activities = activities if activities is not None else [("MainActivity", LAUNCHER_FILTER)]
    package_attr = f' package="{package}"' if package is not None else ''
    body = "\n".join(
        f'        <activity android:name="{name}">{inner}\n        </activity>'
        for name, inner in activities
    )
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f'<manifest xmlns:android="http://schemas.android.com/apk/res/android"{package_attr}>\n'
        '    <application android:label="App">\n'
        f'{body}\n'
        '    </application>\n'
        '</manifest>\n'
    )


def create_mock_process(commands=None, default=(0, "", "")):
    """Create mock ProcessExecutor with configured command responses."""
    process = Mock()
    commands = dict(commands or {})
    consumed = {key: 0 for key in commands}

    def respond(response):
        if isinstance(response, BaseException):
            raise response
        returncode, stdout, stderr = response
        result = Mock()
        result.returncode = returncode
        result.stdout = stdout
        result.stderr = stderr
        return result

    def mock_run(cmd, **kwargs):
        cmd_str = ' '.join(cmd)
        for key, response in commands.items():
            if key in cmd_str:
                if isinstance(response, list):
                    index = min(consumed[key], len(response) - 1)
                    consumed[key] += 1
                    return respond(response[index])
                return respond(response)
        return respond(default)

    process.run.side_effect = mock_run
    process.popen.return_value = Mock(pid=4242)
    return process


def issued_commands(process):
    """Joined command lines passed to process.run, in call order."""
    return [' '.join(c.args[0]) for c in process.run.call_args_list]


def create_mock_filesystem(files=None, dirs=None):
    """Create mock FileSystemService backed by dicts.

    Args:
        files: {path: content}
        dirs: {path: [entry names]}
    """
    fs = Mock()
    files = files or {}
    dirs = dirs or {}

    fs.exists.side_effect = lambda p: str(p) in files or str(p) in dirs
    fs.is_file.side_effect = lambda p: str(p) in files
    fs.is_dir.side_effect = lambda p: str(p) in dirs
    fs.read_file.side_effect = lambda p: files[str(p)]
    fs.iterdir.side_effect = lambda p: iter(dirs.get(str(p), []))
    return fs


def create_mock_env(environ=None, system_type='Linux'):
    """Create mock EnvironmentProvider."""
    env = Mock()
    env.get_environ.return_value = dict(environ or {})
    env.get_system_type.return_value = system_type
    return env

