from typing import Annotated, Literal

from cyclopts import App, Group, Parameter
from loguru import logger

from hrfilesize import FileSizeRangeError, InvalidArgumentError, bytes_to_hr, utils
from hrfilesize import compare as _compare

UnitSystem = Literal['decimal', 'binary']
NumericBackend = Literal['standard', 'arbitrary-precision']

app = App(help_format='markdown', result_action='return_value')
app.meta.group_parameters = Group('Options', sort_key=0)


def _options(**kwargs):
    return {k: v for k, v in kwargs.items() if v is not None}


@app.meta.default
def launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    debug: Annotated[bool, Parameter(name=['--debug', '-d'], negative=[])] = False,
):
    utils.set_logger(level=10 if debug else 20)
    logger.enable('hrfilesize')

    try:
        app(tokens)
    except (InvalidArgumentError, FileSizeRangeError) as e:
        logger.error('{}', e)
        raise SystemExit(1) from e


@app.command
def hr(
    size: int,
    *,
    unit_system: UnitSystem | None = None,
    output_format: str | None = None,
    numeric_backend: NumericBackend | None = None,
):
    """
    바이트 단위 크기를 읽기 쉬운 형식으로 변환.

    Parameters
    ----------
    size : int
        바이트 단위 크기.
    unit_system : UnitSystem | None, optional
        단위 체계. decimal (1000), binary (1024).
    output_format : str | None, optional
        printf 형식 실수 포맷. 예: "%.2f".
    numeric_backend : NumericBackend | None, optional
        나눗셈 계산 방식.
    """
    options = _options(
        unit_system=unit_system,
        output_format=output_format,
        numeric_backend=numeric_backend,
    )
    logger.debug('size={} | options={}', size, options)

    text = bytes_to_hr(size, options)
    utils.cnsl.print(text, highlight=False)

    return text


@app.command
def compare(a: str, b: str, *, unit_system: UnitSystem | None = None):
    """
    읽기 쉬운 형식의 두 크기 비교 (-1, 0, 1).

    Parameters
    ----------
    a : str
        첫 번째 크기. 예: "10.0 KB".
    b : str
        두 번째 크기.
    unit_system : UnitSystem | None, optional
        단위 체계. 두 크기 모두 같은 체계여야 함.
    """
    result = _compare(a, b, _options(unit_system=unit_system))
    logger.debug('"{}" vs "{}" -> {}', a, b, result)
    utils.cnsl.print(result, highlight=False)

    return result


if __name__ == '__main__':
    app.meta()
