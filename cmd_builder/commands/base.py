"""Description d'un processus externe prêt à être lancé.

Ce module définit Command, la spécification mutable d'un lancement
de processus : argv, répertoire de travail, environnement et flux
standard. CmdBuilder la construit, build() l'expose aux appelants
qui ont besoin d'un contrôle plus fin.

Flux acceptés :
    - None : périphérique nul (subprocess.DEVNULL).
    - Objet avec un fileno() valide : transmis directement à l'OS.
    - Tout autre objet (io.StringIO, io.BytesIO, MultiWriter...) :
      le processus écrit dans un pipe recopié par un thread dédié.
"""

import codecs
import subprocess  # nosec B404
import threading
from typing import Any, Dict, List, Optional, Sequence

from cmd_builder.commands.writer import is_text_sink
from cmd_builder.errors.exceptions import (
    CommandAlreadyStartedError,
    CommandNotStartedError,
    CommandStateError,
)

CHUNK_SIZE = 32 * 1024


def _fileno(stream: Any) -> Optional[int]:
    """Retourne le descripteur du flux, ou None s'il n'en a pas."""
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


class Command:
    """Spécification d'un processus, lancée au plus une fois.

    Attributes:
        args: Argv complet, args[0] est le programme.
        dir: Répertoire de travail ("" : répertoire de l'appelant).
        stdin: Source de l'entrée standard.
        stdout: Destination de la sortie standard.
        stderr: Destination de la sortie d'erreur.
        env: Entrées "CLE=VALEUR" ; None hérite de l'environnement.
        process: Popen une fois le processus lancé, None avant.
    """

    def __init__(
        self,
        args: Sequence[str],
        dir: str = "",
        stdin: Any = None,
        stdout: Any = None,
        stderr: Any = None,
        env: Optional[Sequence[str]] = None,
    ) -> None:
        self.args: List[str] = list(args)
        self.dir = dir
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr
        self.env: Optional[List[str]] = (
            list(env) if env is not None else None
        )
        self.process: Optional[subprocess.Popen] = None
        self._copiers: List[threading.Thread] = []
        self._copy_errors: List[BaseException] = []
        self._waited = False

    def __repr__(self) -> str:
        return f"Command(args={self.args!r}, dir={self.dir!r})"

    def environ(self) -> Optional[Dict[str, str]]:
        """Convertit la liste env en dictionnaire pour subprocess.

        Pour une même clé, la dernière entrée l'emporte. Les entrées
        sans "=" sont ignorées.

        Returns:
            Dictionnaire d'environnement, ou None pour hériter.
        """
        if self.env is None:
            return None
        environ: Dict[str, str] = {}
        for entry in self.env:
            key, sep, value = entry.partition("=")
            if sep:
                environ[key] = value
        return environ

    def _output_target(self, sink: Any) -> Any:
        if sink is None:
            return subprocess.DEVNULL
        fd = _fileno(sink)
        if fd is not None:
            if hasattr(sink, "flush"):
                sink.flush()
            return fd
        return subprocess.PIPE

    def _input_target(self, source: Any) -> Any:
        if source is None:
            return subprocess.DEVNULL
        fd = _fileno(source)
        if fd is not None:
            return fd
        return subprocess.PIPE

    def start(self) -> subprocess.Popen:
        """Lance le processus sans attendre sa fin.

        Returns:
            Le Popen du processus lancé.

        Raises:
            CommandAlreadyStartedError: Si la commande a déjà été lancée.
            OSError: Si l'OS refuse de créer le processus
                (FileNotFoundError, PermissionError...).
        """
        if self.process is not None:
            raise CommandAlreadyStartedError(
                f"Commande déjà lancée : {self.args}"
            )

        self.process = subprocess.Popen(  # nosec B603
            self.args,
            cwd=self.dir or None,
            env=self.environ(),
            stdin=self._input_target(self.stdin),
            stdout=self._output_target(self.stdout),
            stderr=self._output_target(self.stderr),
        )

        if self.process.stdin is not None:
            self._spawn(self._copy_input, self.stdin, self.process.stdin)
        if self.process.stdout is not None:
            self._spawn(
                self._copy_output, self.process.stdout, self.stdout
            )
        if self.process.stderr is not None:
            self._spawn(
                self._copy_output, self.process.stderr, self.stderr
            )
        return self.process

    def _spawn(self, target: Any, *args: Any) -> None:
        thread = threading.Thread(target=target, args=args, daemon=True)
        self._copiers.append(thread)
        thread.start()

    def _copy_input(self, source: Any, pipe: Any) -> None:
        try:
            while True:
                chunk = source.read(CHUNK_SIZE)
                if not chunk:
                    break
                if isinstance(chunk, str):
                    chunk = chunk.encode("utf-8")
                pipe.write(chunk)
        except BrokenPipeError:
            # Le processus a fermé son entrée avant la fin de la source.
            pass
        except Exception as e:
            self._copy_errors.append(e)
        finally:
            try:
                pipe.close()
            except BrokenPipeError:
                pass

    def _copy_output(self, pipe: Any, sink: Any) -> None:
        decoder = None
        if is_text_sink(sink):
            decoder = codecs.getincrementaldecoder("utf-8")(
                errors="replace"
            )
        try:
            for chunk in iter(lambda: pipe.read1(CHUNK_SIZE), b""):
                sink.write(decoder.decode(chunk) if decoder else chunk)
            if decoder:
                tail = decoder.decode(b"", final=True)
                if tail:
                    sink.write(tail)
            if hasattr(sink, "flush"):
                sink.flush()
        except Exception as e:
            self._copy_errors.append(e)
        finally:
            pipe.close()

    def wait(self) -> int:
        """Attend la fin du processus et des copies de flux.

        Returns:
            Code retour du processus (toujours 0).

        Raises:
            CommandNotStartedError: Si start() n'a pas été appelé.
            CommandStateError: Si wait() a déjà été appelé.
            subprocess.CalledProcessError: Si le code retour est non nul.
        """
        if self.process is None:
            raise CommandNotStartedError(
                f"Commande non lancée : {self.args}"
            )
        if self._waited:
            raise CommandStateError(
                f"wait() déjà appelé pour : {self.args}"
            )
        self._waited = True

        returncode = self.process.wait()
        for thread in self._copiers:
            thread.join()

        if returncode != 0:
            raise subprocess.CalledProcessError(returncode, self.args)
        if self._copy_errors:
            raise self._copy_errors[0]
        return returncode

    def run(self) -> int:
        """Lance le processus et attend sa fin."""
        self.start()
        return self.wait()
