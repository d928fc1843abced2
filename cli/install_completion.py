import os
import shutil
import subprocess

import click
from shellingham import detect_shell

COMMAND_NAME = "replicate-client"
COMPLETE_VAR = "_REPLICATE_CLIENT_COMPLETE"

SHELL_SETTINGS = {
    "zsh": ("~/.zshrc", "~/.config/replicate-client-completions.zsh"),
    "bash": ("~/.bashrc", "~/.config/replicate-client-completions.bash"),
    "fish": (None, "~/.config/fish/completions/replicate-client.fish"),
}


def generate_completions(shell, completion_path):
    with open(completion_path, mode="w") as completion_file:
        subprocess.run(
            [COMMAND_NAME],
            env={**os.environ, COMPLETE_VAR: f"{shell}_source"},
            stdout=completion_file,
            check=True,
        )
    click.echo(f"Generated completions for {shell}: {completion_path}")


@click.command("install-completion")
def install_completion():
    """Install shell completion script to your rc file"""
    shell, _ = detect_shell()
    if shell not in SHELL_SETTINGS:
        raise RuntimeError(f"Unsupported shell {shell} for completions")
    rc_path, completion_path = SHELL_SETTINGS[shell]
    completion_path_expanded = os.path.expanduser(completion_path)
    os.makedirs(os.path.dirname(completion_path_expanded), exist_ok=True)

    generate_completions(shell, completion_path_expanded)

    # fish picks up files in its completions directory on its own
    if rc_path is None:
        return

    rc_path_expanded = os.path.expanduser(rc_path)
    rc_bak = f"{rc_path_expanded}.bak"
    shutil.copy(rc_path_expanded, rc_bak)
    click.echo(f"Backed up {rc_path} to {rc_bak}")
    with open(rc_path_expanded, mode="a") as rc_file:
        rc_file.write("\n")
        rc_file.write(f"# Shell completion for {COMMAND_NAME}\n")
        rc_file.write(f". {completion_path}")

    click.echo(f"Completion script added to {rc_path}")
    click.echo(f"Don't forget to `source {rc_path}")
