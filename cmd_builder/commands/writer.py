"""Écriture en éventail vers plusieurs sorties.

MultiWriter transmet chaque écriture à toutes les sorties qu'il
enveloppe, dans l'ordre. Il sert à CmdBuilder.output() pour capturer
stdout tout en conservant une sortie déjà assignée.
"""

import codecs
import io
from typing import Any, Union


def is_text_sink(sink: Any) -> bool:
    """Indique si la sortie attend des str plutôt que des bytes."""
    return isinstance(sink, io.TextIOBase)


def write_to(sink: Any, data: Union[bytes, str]) -> None:
    """Écrit data dans sink en adaptant le type (str ou bytes).

    Args:
        sink: Objet possédant une méthode write().
        data: Données à écrire.
    """
    if is_text_sink(sink):
        if isinstance(data, bytes):
            data = data.decode("utf-8", errors="replace")
    elif isinstance(data, str):
        data = data.encode("utf-8")
    sink.write(data)


class MultiWriter:
    """Sortie composite qui duplique chaque écriture.

    Accepte indifféremment des sorties texte (io.TextIOBase) et
    binaires : chaque sortie reçoit les données dans le type
    qu'elle attend. Les bytes destinés à une sortie texte passent
    par un décodeur UTF-8 incrémental, un caractère multi-octets
    coupé entre deux écritures n'est donc pas corrompu.

    Attributes:
        writers: Sorties destinataires, dans l'ordre d'écriture.
    """

    def __init__(self, *writers: Any) -> None:
        self.writers = list(writers)
        self._decoders = {
            index: codecs.getincrementaldecoder("utf-8")(errors="replace")
            for index, writer in enumerate(self.writers)
            if is_text_sink(writer)
        }

    def write(self, data: Union[bytes, str]) -> int:
        """Écrit data dans chaque sortie.

        Une exception levée par une sortie interrompt l'écriture
        et est propagée telle quelle.

        Returns:
            Nombre d'éléments reçus (longueur de data).
        """
        for index, writer in enumerate(self.writers):
            decoder = self._decoders.get(index)
            if decoder is not None and isinstance(data, bytes):
                writer.write(decoder.decode(data))
            else:
                write_to(writer, data)
        return len(data)

    def flush(self) -> None:
        """Vide chaque sortie qui le permet."""
        for index, writer in enumerate(self.writers):
            decoder = self._decoders.get(index)
            if decoder is not None:
                tail = decoder.decode(b"", final=True)
                if tail:
                    writer.write(tail)
            if hasattr(writer, "flush"):
                writer.flush()
