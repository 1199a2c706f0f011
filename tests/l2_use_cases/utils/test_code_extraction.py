"""Tests for fence stripping and preview helpers."""

from __future__ import annotations

import pytest

from code_convert.l2_use_cases.utils.code_extraction import preview_lines, strip_code_fences


class TestStripCodeFences:
    def test_typescript_fence(self):
        assert strip_code_fences('```typescript\nconst x=1;\n```') == 'const x=1;'

    @pytest.mark.parametrize('tag', ['', 'typescript', 'ts', 'javascript', 'js'])
    def test_recognized_tags(self, tag):
        assert strip_code_fences(f'```{tag}\nlet y: number = 2;\n```') == 'let y: number = 2;'

    def test_unfenced_text_only_trimmed(self):
        assert strip_code_fences('  const a = 1;\nconst b = 2;\n\n') == 'const a = 1;\nconst b = 2;'

    def test_idempotent(self):
        once = strip_code_fences('```ts\nlet x=1;\n```')
        assert strip_code_fences(once) == once

    def test_surrounding_whitespace(self):
        assert strip_code_fences('\n\n```ts\nlet x=1;\n```\n  ') == 'let x=1;'

    def test_crlf_line_endings(self):
        assert strip_code_fences('```ts\r\nlet x=1;\r\n```') == 'let x=1;'

    def test_interior_fences_untouched(self):
        content = '```ts\n/**\n * ```js\n * old()\n * ```\n */\nnew();\n```'
        assert strip_code_fences(content) == '/**\n * ```js\n * old()\n * ```\n */\nnew();'

    def test_only_one_trailing_fence_removed(self):
        assert strip_code_fences('```\na\n```\n```') == 'a\n```'

    def test_unknown_tag_leaves_opener(self):
        assert strip_code_fences('```python\nx = 1\n```') == '```python\nx = 1'


class TestPreviewLines:
    def test_first_ten(self):
        content = '\n'.join(f'line {i}' for i in range(25))
        assert preview_lines(content) == [f'line {i}' for i in range(10)]

    def test_short_content(self):
        assert preview_lines('a\nb') == ['a', 'b']
