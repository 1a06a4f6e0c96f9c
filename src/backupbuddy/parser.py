import argparse

from backupbuddy.globals import Globals
from backupbuddy.security import EncryptionTool


def build_parser():
	parser = argparse.ArgumentParser(prog="backupbuddy", description="Runs backup jobs by trigger, one after the other.")
	parser.add_argument("--debug", action="store_true", help="Print debug messages.")
	subparsers = parser.add_subparsers(dest="command")
	subparsers.required = True

	perform = subparsers.add_parser("perform", help="Perform one or more backup jobs.")
	perform.add_argument("-t", "--trigger", required=True, help="Comma-separated list of triggers (e.g. nightly,photos)")
	perform.add_argument("--config-file", help=f"Path to the configuration YAML file (default: {Globals.DEFAULT_CONFIG_FILE})")
	perform.add_argument("--data-path", help=f"Directory for the stored packages (default: {Globals.DEFAULT_DATA_ROOT})")
	perform.add_argument("--log-path", help=f"Directory for the log file (default: {Globals.DEFAULT_LOG_ROOT})")
	perform.add_argument("--tmp-path", help=f"Directory for temporary files (default: {Globals.DEFAULT_TMP_ROOT})")

	decrypt = subparsers.add_parser("decrypt", help="Decrypt a backup package.")
	decrypt.add_argument("--encryptor", required=True, choices=[tool.value for tool in EncryptionTool], help="Tool the package was encrypted with.")
	decrypt.add_argument("--in", dest="in_file", required=True, help="Encrypted input file.")
	decrypt.add_argument("--out", dest="out_file", required=True, help="Decrypted output file.")
	decrypt.add_argument("--password-file", help="File with the OpenSSL passphrase.")
	decrypt.add_argument("--base64", action="store_true", help="OpenSSL only: the input is base64 encoded.")
	decrypt.add_argument("--no-salt", action="store_true", help="OpenSSL only: the input was encrypted without a salt.")

	generate = subparsers.add_parser("generate", help="Generate a configuration file skeleton.")
	generate.add_argument("-t", "--trigger", required=True, help="Comma-separated list of triggers to generate jobs for.")
	generate.add_argument("--config-file", help=f"Where to write the configuration (default: {Globals.DEFAULT_CONFIG_FILE})")

	return parser


def get_arguments(argv=None):
	"""
	Parses command-line arguments for BackupBuddy.

	Parameters:
		argv (list): Arguments without the program name. Defaults to `sys.argv[1:]`.

	Returns:
		dict: The parsed arguments. Keys depend on the sub-command stored under "command".
	"""
	args = build_parser().parse_args(argv)

	if args.command == "perform":
		return {
			"command": "perform",
			"debug": args.debug,
			"triggers": args.trigger,
			"overrides": {
				"config_source": args.config_file,
				"data_root": args.data_path,
				"log_root": args.log_path,
				"tmp_root": args.tmp_path,
			},
		}

	if args.command == "decrypt":
		return {
			"command": "decrypt",
			"debug": args.debug,
			"encryptor": EncryptionTool.from_name(args.encryptor),
			"in_file": args.in_file,
			"out_file": args.out_file,
			"password_file": args.password_file,
			"base64": args.base64,
			"salt": not args.no_salt,
		}

	# Trimmed like the perform triggers, blank tokens are dropped by the generator
	triggers = [token.strip() for token in args.trigger.split(",")]

	return {
		"command": "generate",
		"debug": args.debug,
		"triggers": triggers,
		"config_file": args.config_file if args.config_file is not None else Globals.DEFAULT_CONFIG_FILE,
	}
