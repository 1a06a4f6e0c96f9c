#!/usr/bin/env python3

"""
main.py

Runs backup jobs by trigger. Every trigger given on the command line is
resolved against the YAML configuration and performed, strictly one after
the other. Utilizes tar for archiving and openssl or gpg for encryption.
"""

import logging
import sys

from backupbuddy.config import configure
from backupbuddy.engine import run_triggers
from backupbuddy.errors import BackupBuddyError, ConfigurationError
from backupbuddy.generator import generate_config
from backupbuddy.log import logger, add_file_handler
from backupbuddy.parser import get_arguments
from backupbuddy.resolver import YamlJobResolver
from backupbuddy.security import decrypt_file
from backupbuddy.utils import check_system_dependencies


def perform(args):
	"""
	Configure the paths once, then run every trigger.

	Returns:
		int: 0 if all triggers succeeded, 1 otherwise.
	"""
	if not check_system_dependencies():
		return 1

	try:
		run_config = configure(args["overrides"])
		add_file_handler(run_config.log_root)
	except (ConfigurationError, OSError) as e:
		logger.error(f"Configuration failed: {e}")
		return 1

	results = run_triggers(args["triggers"], run_config, YamlJobResolver())

	failed = [result.trigger for result in results if not result.success]
	if failed:
		logger.error(f"{len(failed)} of {len(results)} trigger(s) failed: {', '.join(failed)}")
		return 1

	logger.info(f"All {len(results)} trigger(s) completed successfully.")
	return 0


def decrypt(args):
	try:
		decrypt_file(args["encryptor"], args["in_file"], args["out_file"],
			password_file=args["password_file"], base64=args["base64"], salt=args["salt"])
	except BackupBuddyError as e:
		logger.error(str(e))
		return 1
	return 0


def generate(args):
	try:
		generate_config(args["config_file"], args["triggers"])
	except ConfigurationError as e:
		logger.error(str(e))
		return 1
	return 0


COMMANDS = {
	"perform": perform,
	"decrypt": decrypt,
	"generate": generate,
}


def main(argv=None):

	# 1. Parse arguments
	args = get_arguments(argv)

	if args["debug"]:
		logger.setLevel(logging.DEBUG)

	# 2. Run the selected command
	return COMMANDS[args["command"]](args)


if __name__ == "__main__":
	sys.exit(main())
