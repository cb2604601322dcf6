"""Unit tests for EnvironmentChecker."""
import pytest

from apprunner.android.environment import EnvironmentChecker
from apprunner.android.exceptions import EnvError, SdkRootMissingError, SdkRootNotFoundError

from helpers import SDK_ROOT, create_mock_env, create_mock_filesystem


def make_checker(environ, dirs=None, variable="ANDROID_HOME"):
    return EnvironmentChecker(
        env_provider=create_mock_env(environ),
        filesystem=create_mock_filesystem(dirs=dirs),
        variable=variable
    )


class TestEnvironmentCheckerVerify:
    """Test EnvironmentChecker.verify()."""

    def test_existing_nonempty_directory_passes(self):
        checker = make_checker({"ANDROID_HOME": SDK_ROOT}, dirs={SDK_ROOT: ["platform-tools"]})

        assert checker.verify() == SDK_ROOT

    def test_surrounding_whitespace_is_stripped(self):
        checker = make_checker({"ANDROID_HOME": f"  {SDK_ROOT}\n"}, dirs={SDK_ROOT: ["emulator"]})

        assert checker.verify() == SDK_ROOT

    @pytest.mark.parametrize("environ", [{}, {"ANDROID_HOME": ""}, {"ANDROID_HOME": "   "}])
    def test_unset_or_empty_variable_is_missing(self, environ):
        checker = make_checker(environ, dirs={SDK_ROOT: ["platform-tools"]})

        with pytest.raises(SdkRootMissingError, match="ANDROID_HOME is not set"):
            checker.verify()

    def test_nonexistent_path_is_not_found(self):
        checker = make_checker({"ANDROID_HOME": "/does/not/exist"})

        with pytest.raises(SdkRootNotFoundError, match="/does/not/exist"):
            checker.verify()

    def test_empty_directory_is_not_found(self):
        checker = make_checker({"ANDROID_HOME": SDK_ROOT}, dirs={SDK_ROOT: []})

        with pytest.raises(SdkRootNotFoundError, match="empty"):
            checker.verify()

    def test_unreadable_directory_is_not_found(self):
        checker = make_checker({"ANDROID_HOME": SDK_ROOT}, dirs={SDK_ROOT: ["platform-tools"]})
        checker.fs.iterdir.side_effect = PermissionError(13, "Permission denied")

        with pytest.raises(SdkRootNotFoundError, match="cannot be read"):
            checker.verify()

    def test_errors_share_env_error_base(self):
        checker = make_checker({})

        with pytest.raises(EnvError):
            checker.verify()

    def test_custom_variable_name(self):
        checker = make_checker(
            {"ANDROID_SDK_ROOT": SDK_ROOT},
            dirs={SDK_ROOT: ["platform-tools"]},
            variable="ANDROID_SDK_ROOT"
        )

        assert checker.verify() == SDK_ROOT
