#!/usr/bin/env python3
# -*- coding: utf-8 -*
import os

import click

from md5 import MD5
from md5_config import ERROR_EXITCODE, HASH_OUTPUT_PREFIX
from md5_io import FileAccessError, read_file_bytes, to_hex_string, write_file
from md5_logger import get_logger

USAGE = ('--message="..." [--outputFile="..."] | '
         '--messageFile="..." [--outputFile="..."]')

logger = get_logger()


class ArgumentError(click.UsageError):
    exit_code = ERROR_EXITCODE


class MutuallyExclusiveOption(click.Option):
    """
    Mutually exclude other specified options
    """

    def __init__(self, *args, **kwargs):
        self.mutually_exclusive = set(kwargs.pop('mutually_exclusive', []))
        help = kwargs.get('help', '')
        if self.mutually_exclusive:
            ex_str = ', '.join(sorted(self.mutually_exclusive))
            kwargs['help'] = help + (
                ' NOTE: This argument is mutually exclusive with '
                ' arguments: [' + ex_str + '].'
            )
        super(MutuallyExclusiveOption, self).__init__(*args, **kwargs)

    def handle_parse_result(self, ctx, opts, args):
        conflicts = self.mutually_exclusive.intersection(opts)
        if self.name in opts and conflicts:
            others = [_display_name(ctx, name) for name in sorted(conflicts)]
            raise ArgumentError(
                "Both {} and {} provided.".format(
                    _display_name(ctx, self.name), ', '.join(others)),
                ctx=ctx
            )
        return super(MutuallyExclusiveOption, self).handle_parse_result(
            ctx,
            opts,
            args
        )


class AssignmentOnlyCommand(click.Command):
    """
    Command accepting arguments only as unique `--name=value` tokens.
    Every usage error exits with ERROR_EXITCODE.
    """

    def parse_args(self, ctx, args):
        accepted = {opt for param in self.params for opt in param.opts}
        seen = set()
        for arg in args:
            if arg in ctx.help_option_names:
                continue
            name, sep, _ = arg.partition('=')
            if not name.startswith('--') or not sep:
                raise ArgumentError('Invalid argument: {}'.format(arg), ctx=ctx)
            if name not in accepted:
                raise ArgumentError('Unknown argument: {}'.format(name[2:]), ctx=ctx)
            if name in seen:
                raise ArgumentError('Duplicate argument: {}'.format(name[2:]), ctx=ctx)
            seen.add(name)

        try:
            return super(AssignmentOnlyCommand, self).parse_args(ctx, args)
        except click.UsageError as error:
            error.exit_code = ERROR_EXITCODE
            raise


def _display_name(ctx, param_name):
    for param in ctx.command.params:
        if param.name == param_name:
            return param.opts[0].lstrip('-')
    return param_name


def get_message(ctx, message, message_file):
    """Return the bytes to hash from exactly one of message / message_file."""
    if message is not None:
        logger.debug('hashing message given on the command line')
        return os.fsencode(message)
    if message_file is None:
        raise ArgumentError('No message provided.', ctx=ctx)

    logger.debug('hashing contents of {}'.format(message_file))
    try:
        return read_file_bytes(message_file)
    except FileAccessError as error:
        raise ArgumentError(error.message, ctx=ctx) from error


def emit_digest(digest, output_file=None):
    """Print the hex digest, or write it to output_file when one is given."""
    if output_file is None:
        click.echo(HASH_OUTPUT_PREFIX + digest)
        return

    logger.debug('writing digest to {}'.format(output_file))
    click.echo('Writing hash to {}...'.format(output_file), nl=False)
    try:
        write_file(output_file, digest)
    except FileAccessError as error:
        click.echo()
        raise click.FileError(output_file, hint=str(error.__cause__)) from error
    click.echo(' Done.')


@click.command('md5', cls=AssignmentOnlyCommand, options_metavar=USAGE,
               help='Compute the MD5 digest of a message or of a file.')
@click.option('--message', 'message', type=str, cls=MutuallyExclusiveOption,
              mutually_exclusive=['message_file'], help='Text to hash.')
@click.option('--messageFile', 'message_file', type=str, cls=MutuallyExclusiveOption,
              mutually_exclusive=['message'], help='File whose raw bytes are hashed.')
@click.option('--outputFile', 'output_file', type=str,
              help='Write the hex digest to this file instead of printing it.')
@click.pass_context
def md5_command(ctx, message, message_file, output_file):
    data = get_message(ctx, message, message_file)
    logger.debug('message is {} bytes'.format(len(data)))
    digest = to_hex_string(MD5().digest(data))
    emit_digest(digest, output_file)


def main():
    md5_command(prog_name='md5')


if __name__ == '__main__':
    main()
