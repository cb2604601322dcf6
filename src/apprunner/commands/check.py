"""Pre-flight checker for the Android launch toolchain"""
import os
from typing import List, Optional, Tuple

from apprunner.android import (
    EnvironmentChecker,
    ManifestReader,
    EnvError,
    ManifestError,
    ConfigError,
)
from apprunner.core import (
    FileSystemService,
    EnvironmentProvider,
    Logger
)
from apprunner.utils.config import RunnerConfig


class SetupCheck:
    """Represents a single toolchain check"""
    def __init__(self, name: str, status: str, message: str, critical: bool = False):
        self.name = name
        self.status = status  # 'pass', 'warn', 'fail'
        self.message = message
        self.critical = critical


class SetupChecker:
    """Checks everything `apprunner run` needs before it touches a device.

    Reuses the pipeline's own EnvironmentChecker and ManifestReader so the
    report agrees with what a run would do.
    """

    def __init__(
        self,
        config: RunnerConfig,
        filesystem: FileSystemService,
        env_provider: EnvironmentProvider,
        logger: Logger
    ):
        self.config = config
        self.fs = filesystem
        self.env = env_provider
        self.log = logger
        self._sdk_root: Optional[str] = None

    def check_sdk_root(self) -> SetupCheck:
        try:
            self._sdk_root = EnvironmentChecker(self.env, self.fs, self.config.sdk_env_var).verify()
        except EnvError as e:
            return SetupCheck('Android SDK', 'fail', str(e).splitlines()[0], critical=True)
        return SetupCheck('Android SDK', 'pass', self._sdk_root)

    def check_adb(self) -> SetupCheck:
        if self._sdk_root is None:
            return SetupCheck('adb', 'fail', 'Skipped (no SDK root)', critical=True)
        adb = os.path.join(self._sdk_root, 'platform-tools', 'adb')
        if self.fs.is_file(adb):
            return SetupCheck('adb', 'pass', adb)
        return SetupCheck('adb', 'fail', f'Not found at {adb} (install platform-tools)', critical=True)

    def check_emulator(self) -> SetupCheck:
        """Emulator is only needed when no device is attached."""
        if self._sdk_root is None:
            return SetupCheck('Emulator', 'warn', 'Skipped (no SDK root)')
        emulator = os.path.join(self._sdk_root, 'emulator', 'emulator')
        if self.fs.is_file(emulator):
            return SetupCheck('Emulator', 'pass', emulator)
        return SetupCheck('Emulator', 'warn', f'Not found at {emulator} (a physical device will be required)')

    def check_gradle_wrapper(self) -> SetupCheck:
        wrapper = os.path.join(self.config.project_dir, 'gradlew')
        if self.fs.is_file(wrapper):
            return SetupCheck('Gradle wrapper', 'pass', wrapper)
        return SetupCheck('Gradle wrapper', 'fail', f'Not found at {wrapper}', critical=True)

    def check_manifest(self) -> SetupCheck:
        try:
            package_id, activity = ManifestReader(self.fs).parse(self.config.manifest_path)
        except ManifestError as e:
            return SetupCheck('Manifest', 'fail', str(e).splitlines()[0], critical=True)
        return SetupCheck('Manifest', 'pass', f'{package_id}/{activity}')

    def check_platform(self) -> SetupCheck:
        system = self.env.get_system_type()
        if system == 'Windows':
            return SetupCheck('Platform', 'warn', 'Windows needs a POSIX `sh` on PATH to run gradlew')
        return SetupCheck('Platform', 'pass', system)

    def run_all_checks(self) -> Tuple[List[SetupCheck], bool]:
        """Run all checks.

        Returns:
            Tuple of (list of checks, all_pass boolean)
        """
        checks = [
            self.check_platform(),
            self.check_sdk_root(),
            self.check_adb(),
            self.check_emulator(),
            self.check_gradle_wrapper(),
            self.check_manifest(),
        ]

        all_pass = all(
            check.status != 'fail' and not (check.critical and check.status == 'warn')
            for check in checks
        )

        return checks, all_pass

    def print_results(self, checks: List[SetupCheck]) -> None:
        self.log.info("=" * 80)
        self.log.info("ANDROID TOOLCHAIN CHECK")
        self.log.info("=" * 80)
        self.log.info("")

        symbols = {
            'pass': '✓',
            'warn': '⚠',
            'fail': '✗'
        }

        for check in checks:
            symbol = symbols.get(check.status, '?')
            critical_marker = ' [CRITICAL]' if check.critical else ''
            self.log.info(f"{symbol} {check.name}: {check.message}{critical_marker}")

        self.log.info("")
        self.log.info("=" * 80)

        pass_count = sum(1 for c in checks if c.status == 'pass')
        warn_count = sum(1 for c in checks if c.status == 'warn')
        fail_count = sum(1 for c in checks if c.status == 'fail')

        self.log.info(f"Summary: {pass_count} passed, {warn_count} warnings, {fail_count} failed")
        self.log.info("=" * 80)


def setup_parser(parser):
    """Setup argument parser for check command"""
    parser.add_argument(
        '--config',
        help='Path to apprunner.yaml (default: ./apprunner.yaml if present)'
    )


def execute(args):
    """Execute toolchain check.

    Returns:
        Exit code: 0 if all checks passed, 1 if critical failures detected
    """
    from apprunner.core import (
        ConsoleLogger,
        RealFileSystemService,
        SystemEnvironmentProvider,
        YamlConfigLoader,
    )
    from apprunner.utils.config import load_config

    filesystem = RealFileSystemService()
    logger = ConsoleLogger()

    try:
        config = load_config(YamlConfigLoader(filesystem), filesystem, args.config)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    checker = SetupChecker(
        config=config,
        filesystem=filesystem,
        env_provider=SystemEnvironmentProvider(),
        logger=logger
    )

    checks, all_pass = checker.run_all_checks()
    checker.print_results(checks)

    return 0 if all_pass else 1
