"""Devices command - show attached devices and bootable emulators."""
from apprunner.android import (
    DeviceBridge,
    DeviceState,
    DeviceProbe,
    EmulatorLauncher,
    EnvironmentChecker,
    RunnerError,
    AmbiguousDeviceError,
)
from apprunner.core import (
    ConsoleLogger,
    RealFileSystemService,
    SubprocessExecutor,
    SystemEnvironmentProvider,
    YamlConfigLoader,
)
from apprunner.utils.config import load_config


def setup_parser(parser):
    """Setup argument parser for devices command"""
    parser.add_argument(
        '--config',
        help='Path to apprunner.yaml (default: ./apprunner.yaml if present)'
    )


def report_devices(bridge, logger):
    """Log the device classification and the AVD a run would boot.

    Returns:
        Exit code: 0 when a run could pick a device, 1 otherwise
    """
    try:
        state = DeviceProbe(bridge).check()
    except AmbiguousDeviceError as e:
        logger.error(str(e).splitlines()[0])
        return 1

    logger.info(f"Devices: {state.value}")

    emulator = EmulatorLauncher(bridge, logger)
    names = emulator.list_available()
    if names:
        logger.info("Emulators:")
        for name in names:
            logger.info(f"  {name}")
        logger.info(f"Would boot: {emulator.select(names)}")
    else:
        logger.info("Emulators: none configured")

    if state is DeviceState.NONE and not names:
        return 1
    return 0


def execute(args):
    """Execute devices command"""
    logger = ConsoleLogger()
    filesystem = RealFileSystemService()

    try:
        config = load_config(YamlConfigLoader(filesystem), filesystem, args.config)
        sdk_root = EnvironmentChecker(SystemEnvironmentProvider(), filesystem, config.sdk_env_var).verify()
        bridge = DeviceBridge(SubprocessExecutor(), sdk_root, config.project_dir)
        return report_devices(bridge, logger)
    except RunnerError as e:
        logger.error(str(e))
        return 1
