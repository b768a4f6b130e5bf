# file: aes256cbc/cli.py
"""
Command line front end mirroring `openssl enc -aes-256-cbc -md md5`.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import load_config
from .crypto_errors import CryptoError
from .encoding import base64_decrypt, base64_encrypt
from .openssl_cbc import decrypt, encrypt


PASSWORD_ENV = "AES256CBC_PASSWORD"


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(verbose: bool = False, level: str = "WARNING"):
    """Configure logging for the command line tool."""
    if verbose:
        resolved = logging.INFO
    else:
        resolved = logging.getLevelName(str(level).upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING
    logging.basicConfig(
        level=resolved,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


# =============================================================================
# COMMAND-LINE INTERFACE
# =============================================================================

def _hex_salt(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hex salt: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='aes256cbc',
        description='OpenSSL-compatible AES-256-CBC encryption (MD5 key derivation)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encrypt to base64, readable by openssl
  aes256cbc enc -k secret -a -in notes.txt -out notes.enc
  openssl enc -d -aes-256-cbc -md md5 -a -k secret -in notes.enc

  # Decrypt a file produced by openssl
  openssl enc -e -aes-256-cbc -md md5 -k secret -in data.bin -out data.enc
  aes256cbc dec -k secret -in data.enc -out data.bin
        """
    )

    parser.add_argument(
        'mode',
        choices=['enc', 'dec'],
        help='enc to encrypt, dec to decrypt'
    )

    parser.add_argument(
        '-k',
        dest='password',
        default=None,
        help=f'Password (default: ${PASSWORD_ENV})'
    )

    parser.add_argument(
        '-a',
        dest='base64',
        action='store_true',
        help='Base64 encode output (enc) or decode input (dec)'
    )

    parser.add_argument(
        '-S',
        dest='salt',
        type=_hex_salt,
        default=None,
        help='Salt as hex (enc only, default: random)'
    )

    parser.add_argument(
        '-in',
        dest='infile',
        default=None,
        help='Input file (default: stdin)'
    )

    parser.add_argument(
        '-out',
        dest='outfile',
        default=None,
        help='Output file (default: stdout)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration YAML file (default: packaged default_config.yaml)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    return parser


def _read_input(path: Optional[str]) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    with open(path, 'rb') as f:
        return f.read()


def _write_output(path: Optional[str], data: bytes):
    if path is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(path, 'wb') as f:
        f.write(data)


def run(args: argparse.Namespace, config: dict) -> bytes:
    """
    Execute one encrypt or decrypt request.

    Args:
        args: Parsed arguments (password already resolved)
        config: Configuration dictionary

    Returns:
        Bytes to write to the output
    """
    data = _read_input(args.infile)
    logging.info(f"Read {len(data)} bytes from {args.infile or '<stdin>'}")

    if args.mode == 'enc':
        if args.base64:
            line_length = config['encoding']['line_length']
            return base64_encrypt(data, args.password, args.salt, line_length=line_length)
        return encrypt(data, args.password, args.salt)

    if args.base64:
        return base64_decrypt(data, args.password)
    return decrypt(data, args.password)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line tool."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.password is None:
        args.password = os.environ.get(PASSWORD_ENV)
    if args.password is None:
        parser.error(f"a password is required (-k or ${PASSWORD_ENV})")
    if args.salt is not None and args.mode == 'dec':
        parser.error("-S is only valid with enc")

    config = load_config(args.config)
    setup_logging(verbose=args.verbose, level=config['logging']['level'])

    try:
        result = run(args, config)
        _write_output(args.outfile, result)
    except CryptoError as e:
        logging.error(f"{args.mode} failed: {e}")
        print(f"error: {e.kind.value}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logging.error(f"I/O failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    logging.info(f"Wrote {len(result)} bytes to {args.outfile or '<stdout>'}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
