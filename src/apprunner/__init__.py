"""
apprunner - Android app launcher

A command-line interface that checks the Android toolchain, finds or boots a
device, installs the debug build and starts the app's launcher activity.
"""
import argparse
import sys

__version__ = "1.0.0"


def main():
    """Main CLI entry point"""
    from apprunner.commands import run, check, devices

    parser = argparse.ArgumentParser(
        prog='apprunner',
        description='apprunner: build, install and launch an Android app',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  apprunner run                     # Check, boot/attach device, install, launch
  apprunner run -v                  # Same, with adb details
  apprunner run --config ci.yaml    # Use a custom config file
  apprunner check                   # Pre-flight toolchain report
  apprunner devices                 # Show devices and bootable emulators
        '''
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # Run command
    run_parser = subparsers.add_parser('run', help='Launch the app on a device')
    run.setup_parser(run_parser)

    # Check command
    check_parser = subparsers.add_parser('check', help='Check the Android toolchain')
    check.setup_parser(check_parser)

    # Devices command
    devices_parser = subparsers.add_parser('devices', help='Show devices and emulators')
    devices.setup_parser(devices_parser)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Dispatch to command handler
    try:
        if args.command == 'run':
            sys.exit(run.execute(args))
        elif args.command == 'check':
            sys.exit(check.execute(args))
        elif args.command == 'devices':
            sys.exit(devices.execute(args))
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
