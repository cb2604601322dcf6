"""Unit tests for SetupChecker (check command)."""
from apprunner.commands.check import SetupChecker
from apprunner.utils.config import RunnerConfig

from helpers import SDK_ROOT, create_mock_env, create_mock_filesystem, make_manifest

CONFIG = RunnerConfig()
ADB_PATH = f"{SDK_ROOT}/platform-tools/adb"
EMULATOR_PATH = f"{SDK_ROOT}/emulator/emulator"
GRADLEW = "platform/android/gradlew"


def make_checker(logger, files=None, environ=None, system_type='Linux'):
    default_files = {
        ADB_PATH: "",
        EMULATOR_PATH: "",
        GRADLEW: "",
        CONFIG.manifest_path: make_manifest(),
    }
    return SetupChecker(
        config=CONFIG,
        filesystem=create_mock_filesystem(
            files=default_files if files is None else files,
            dirs={SDK_ROOT: ["platform-tools", "emulator"]}
        ),
        env_provider=create_mock_env(
            {"ANDROID_HOME": SDK_ROOT} if environ is None else environ, system_type
        ),
        logger=logger
    )


def by_name(checks):
    return {c.name: c for c in checks}


class TestSetupChecker:

    def test_init_stores_dependencies(self, logger):
        checker = make_checker(logger)

        assert checker.config is CONFIG
        assert checker.log is logger

    def test_complete_setup_passes(self, logger):
        checks, all_pass = make_checker(logger).run_all_checks()

        assert all_pass
        assert all(c.status == 'pass' for c in checks)
        assert by_name(checks)['Manifest'].message == "com.example.app/MainActivity"

    def test_missing_sdk_root_fails_dependent_checks(self, logger):
        checks, all_pass = make_checker(logger, environ={}).run_all_checks()

        results = by_name(checks)
        assert not all_pass
        assert results['Android SDK'].status == 'fail'
        assert results['adb'].status == 'fail'
        assert results['Emulator'].status == 'warn'

    def test_missing_emulator_is_only_a_warning(self, logger):
        files = {ADB_PATH: "", GRADLEW: "", CONFIG.manifest_path: make_manifest()}

        checks, all_pass = make_checker(logger, files=files).run_all_checks()

        assert all_pass
        assert by_name(checks)['Emulator'].status == 'warn'

    def test_missing_gradle_wrapper_fails(self, logger):
        files = {ADB_PATH: "", EMULATOR_PATH: "", CONFIG.manifest_path: make_manifest()}

        checks, all_pass = make_checker(logger, files=files).run_all_checks()

        assert not all_pass
        assert by_name(checks)['Gradle wrapper'].critical

    def test_manifest_without_launcher_fails(self, logger):
        files = {ADB_PATH: "", EMULATOR_PATH: "", GRADLEW: "", CONFIG.manifest_path: make_manifest(activities=[])}

        checks, all_pass = make_checker(logger, files=files).run_all_checks()

        assert not all_pass
        assert by_name(checks)['Manifest'].status == 'fail'

    def test_windows_warns(self, logger):
        checks, all_pass = make_checker(logger, system_type='Windows').run_all_checks()

        assert all_pass
        assert by_name(checks)['Platform'].status == 'warn'

    def test_print_results_summary(self, logger):
        checker = make_checker(logger, environ={})
        checks, _ = checker.run_all_checks()

        checker.print_results(checks)

        lines = [c.args[0] for c in logger.info.call_args_list]
        assert any(line.startswith("Summary: ") for line in lines)
        assert any("[CRITICAL]" in line for line in lines)
