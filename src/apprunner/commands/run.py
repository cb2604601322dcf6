"""Run command - launch the app on a device end to end."""
from apprunner.android import LaunchPipeline, RunnerError
from apprunner.core import (
    ConsoleLogger,
    RealFileSystemService,
    SubprocessExecutor,
    SystemTimeProvider,
    SystemEnvironmentProvider,
    YamlConfigLoader,
)
from apprunner.utils.config import load_config


def setup_parser(parser):
    """Setup argument parser for run command"""
    parser.add_argument(
        '--config',
        help='Path to apprunner.yaml (default: ./apprunner.yaml if present)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show adb command details'
    )


def execute(args):
    """Execute run command"""
    logger = ConsoleLogger(verbose=args.verbose)
    filesystem = RealFileSystemService()

    logger.info("=" * 80)
    logger.info("ANDROID APP LAUNCH")
    logger.info("=" * 80)

    try:
        config = load_config(YamlConfigLoader(filesystem), filesystem, args.config)

        pipeline = LaunchPipeline(
            config=config,
            filesystem=filesystem,
            process_executor=SubprocessExecutor(),
            time_provider=SystemTimeProvider(),
            env_provider=SystemEnvironmentProvider(),
            logger=logger
        )
        context = pipeline.run()
    except RunnerError as e:
        logger.error(str(e))
        return 1

    logger.info("")
    logger.info(f"✓ {context.component_name} is running")
    return 0
