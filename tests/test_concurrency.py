from concurrent.futures import ThreadPoolExecutor

import sexpformat

documents = [
    "(module(pts(xy 0 0)(xy 1 0)(xy 1 1)))",
    "(font(size 1 1)(thickness 0.1))",
    '(a "b (c" d (e f g h i j))',
    "(a b))",
] * 8


def format_interleaved(config):
    prettifiers = [sexpformat.Prettifier(config) for _ in documents]
    outputs = [[] for _ in documents]
    longest = max(len(d) for d in documents)
    for i in range(longest):
        for document, prettifier, out in zip(documents, prettifiers, outputs):
            if i < len(document):
                prettifier.process(document[i], out.append)
    for prettifier, out in zip(prettifiers, outputs):
        prettifier.finish(out.append)
    return ["".join(out) for out in outputs]


def test_interleaved_streams_are_independent():
    config = sexpformat.KICAD_COMPACT
    expected = [sexpformat.prettify_str(d, config) for d in documents]
    assert format_interleaved(config) == expected


def test_streams_on_separate_threads():
    config = sexpformat.KICAD_COMPACT
    expected = [sexpformat.prettify_str(d, config) for d in documents]
    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(
            executor.map(lambda d: sexpformat.prettify_str(d, config), documents)
        )
    assert results == expected
