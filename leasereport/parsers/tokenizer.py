from typing import IO, Iterator, NamedTuple, Optional, Union

ENTRY_TERMINATOR = b"}"
DEFAULT_CHUNK_SIZE = 4096


class ScanResult(NamedTuple):
    consumed: int
    block: Optional[bytes]
    need_more: bool


def next_block(buffer: bytes, at_eof: bool) -> ScanResult:
    """
    Отрезает от буфера один блок записи до закрывающей скобки.
    Скобка не входит в блок, но считается прочитанной.
    Без скобки: до EOF просим ещё данных, на EOF хвост отбрасываем.
    """
    if at_eof and not buffer:
        return ScanResult(0, None, False)

    i = buffer.find(ENTRY_TERMINATOR)
    if i >= 0:
        return ScanResult(i + 1, buffer[:i], False)

    if at_eof:
        # Незакрытая запись в конце файла не попадает в отчёт
        return ScanResult(len(buffer), None, False)

    return ScanResult(0, None, True)


def iter_blocks(stream: IO[Union[bytes, str]], chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """
    Лениво отдаёт сырые блоки записей из потока.
    Результат не зависит от того, какими кусками поток отдаёт данные.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size должен быть положительным, получено {chunk_size}")

    buffer = b""
    at_eof = False

    while True:
        result = next_block(buffer, at_eof)

        if result.need_more:
            chunk = stream.read(chunk_size)
            if isinstance(chunk, str):
                chunk = chunk.encode("utf-8")
            if not chunk:
                at_eof = True
            else:
                buffer += chunk
            continue

        buffer = buffer[result.consumed:]

        if result.block is not None:
            yield result.block
        elif at_eof and not buffer:
            return
