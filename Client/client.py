"""
Crowdin Sync Client - Main Entry Point

This is the main entry point for the Crowdin sync client.
Parses command-line arguments and hands the job over to CLI mode.

Author: Crowdin Sync Project
"""

import sys
import argparse

from version import VERSION


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='crowdin-sync',
        description='Crowdin Sync - upload translation templates and download translations',
        epilog='The API key can also come from CROWDIN_API_KEY or the OS credential store (see store-key)'
    )

    parser.add_argument('operation', choices=['upload', 'download', 'store-key'],
                        help='Job to perform')

    # Connection options (override config.json)
    parser.add_argument('--api-key', dest='api_key',
                        help='Crowdin project API key')
    parser.add_argument('--project-identifier', dest='project_identifier',
                        help='Crowdin project identifier')
    parser.add_argument('--endpoint-url', dest='endpoint_url',
                        help='API base URL (default: https://api.crowdin.com/api)')
    parser.add_argument('--config', dest='config',
                        help='Path to config.json')

    # Upload job
    parser.add_argument('--src-file', dest='src_file',
                        help='Local file to upload (upload job)')
    parser.add_argument('--filename', dest='filename',
                        help='Remote filename, #GIT_BRANCH# is replaced by the current branch (upload job)')
    parser.add_argument('--repo-path', dest='repo_path',
                        help='Git working tree used to resolve #GIT_BRANCH# (default: current directory)')

    # Download job
    parser.add_argument('--output-dir', dest='output_dir',
                        help='Directory to extract translations into (download job)')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log debug output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')

    return parser


def main(argv=None):
    """
    Main entry point for the Crowdin sync client.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    from cli import run_cli_operation
    options = vars(args)
    operation = options.pop('operation')
    return run_cli_operation(operation, options)


if __name__ == '__main__':
    sys.exit(main())
