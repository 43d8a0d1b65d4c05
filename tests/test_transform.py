from typing import Any

import pytest
from jsx2htm.compiler.ast_nodes import Element, ExpressionChild, Fragment, TextChild
from jsx2htm.compiler.config import CompileConfig
from jsx2htm.compiler.exceptions import JsxSyntaxError, UnsupportedConstruct
from jsx2htm.compiler.imports import inject_import
from jsx2htm.compiler.parser import JsxDocument
from jsx2htm.compiler.transform import transform_source


def compile(code: str, **options: Any) -> str:
    return transform_source(code, CompileConfig.from_options(options)).code


class TestElementsAndText:
    def test_single_named_element(self) -> None:
        assert compile("(<div />);") == "html`<div/>`;"
        assert compile("(<div>a</div>);") == "html`<div>a</div>`;"

    def test_single_component_element(self) -> None:
        assert compile("(<Foo />);") == "html`<${Foo}/>`;"
        assert compile("(<Foo>a</Foo>);") == "html`<${Foo}>a</${Foo}>`;"

    def test_member_and_custom_element_tags(self) -> None:
        assert compile("(<ui.Button />);") == "html`<${ui.Button}/>`;"
        assert compile("(<my-element />);") == "html`<my-element/>`;"

    def test_static_text(self) -> None:
        assert compile("(<div>Hello</div>);") == "html`<div>Hello</div>`;"
        assert compile("(<div>こんにちわ</div>);") == "html`<div>こんにちわ</div>`;"

    def test_html_entities_get_unescaped(self) -> None:
        assert compile("(<div>&amp;</div>);") == "html`<div>&</div>`;"

    def test_less_than_gets_wrapped_into_an_expression(self) -> None:
        assert (
            compile("(<div>a&lt;b&lt;&lt;&lt;c</div>);")
            == 'html`<div>${"a<b<<<c"}</div>`;'
        )


class TestExplicitClose:
    def test_use_explicit_end_tags_instead_of_self_closing(self) -> None:
        assert compile("(<div />);", html=True) == "html`<div></div>`;"
        assert compile("(<div a />);", html=True) == "html`<div a></div>`;"
        assert compile("(<a>b</a>);", html=True) == "html`<a>b</a>`;"

    def test_empty_source_close_tag_self_closes_by_default(self) -> None:
        assert compile("(<div></div>);") == "html`<div/>`;"


class TestProps:
    def test_static_values(self) -> None:
        assert (
            compile('(<div a="a" b="bb" c d />);')
            == 'html`<div a="a" b="bb" c d/>`;'
        )
        assert compile('(<div a="こんにちわ" />);') == 'html`<div a="こんにちわ"/>`;'

    def test_html_entities_get_unescaped(self) -> None:
        assert compile('(<div a="&amp;" />);') == 'html`<div a="&"/>`;'

    def test_double_quote_values_with_single_quotes(self) -> None:
        assert compile("(<div a=\"'b'\" />);") == "html`<div a=\"'b'\"/>`;"

    def test_single_quote_values_with_double_quotes(self) -> None:
        assert compile("(<div a='\"b\"' />);") == "html`<div a='\"b\"'/>`;"

    def test_escape_values_with_newlines_as_expressions(self) -> None:
        assert compile('(<div a="\n" />);') == 'html`<div a=${"\\n"}/>`;'

    def test_escape_values_with_both_quotes_as_expressions(self) -> None:
        assert compile("(<div a=\"&#34;'\" />);") == 'html`<div a=${"\\"\'"}/>`;'

    def test_expression_values(self) -> None:
        assert (
            compile(
                'const Foo = (props, a) => <div a={a} b={"b"} c={{}} d={props.d} e />;'
            )
            == 'const Foo = (props, a) => html`<div a=${a} b=${"b"} c=${{}} d=${props.d} e/>`;'
        )

    def test_spread(self) -> None:
        assert (
            compile("const Foo = props => <div {...props} />;")
            == "const Foo = props => html`<div ...${props}/>`;"
        )
        assert compile("(<div {...{}} />);") == "html`<div ...${{}}/>`;"
        assert compile("(<div a {...b} c />);") == "html`<div a ...${b} c/>`;"

    def test_empty_expression_value_is_unsupported(self) -> None:
        with pytest.raises(UnsupportedConstruct, match="non-empty expression"):
            compile("(<div a={} />);")


class TestNesting:
    def test_element_children_are_merged_into_one_template(self) -> None:
        assert (
            compile(
                'const Foo = () => <div class="foo" draggable>\n'
                "  <h1>Hello</h1>\n"
                "  <p>world.</p>\n"
                "</div>;"
            )
            == 'const Foo = () => html`<div class="foo" draggable><h1>Hello</h1><p>world.</p></div>`;'
        )

    def test_inter_element_whitespace_is_collapsed(self) -> None:
        assert (
            compile(
                "const Foo = props => <div a b> a \n <em> b \n B </em> c "
                "<strong> d </strong> e </div>;"
            )
            == "const Foo = props => html`<div a b> a<em> b B </em> c "
            "<strong> d </strong> e </div>`;"
        )

    def test_nested_jsx_expressions_produce_nested_templates(self) -> None:
        assert (
            compile(
                "const Foo = props => <ul>{props.items.map(item =>\n"
                "  <li>\n"
                "    {item}\n"
                "  </li>\n"
                ")}</ul>;"
            )
            == "const Foo = props => html`<ul>${props.items.map(item => html`<li>${item}</li>`)}</ul>`;"
        )

    def test_line_breaks_around_nested_trees(self) -> None:
        assert (
            compile("(<div>{[\n  <a />,\n  <b />\n]}</div>);")
            == "html`<div>${[html`<a/>`, html`<b/>`]}</div>`;"
        )
        assert (
            compile("(<div>{ok &&\n  <b />\n  || null}</div>);")
            == "html`<div>${ok && html`<b/>` || null}</div>`;"
        )

    def test_line_break_after_comment_is_kept(self) -> None:
        assert (
            compile("(<div>{f(a, // note\n  <b />)}</div>);")
            == "html`<div>${f(a, // note\n  html`<b/>`)}</div>`;"
        )

    def test_element_expression_child(self) -> None:
        assert compile("(<div>{<b>x</b>}</div>);") == "html`<div>${html`<b>x</b>`}</div>`;"
        assert compile("(<div>{(<b />)}</div>);") == "html`<div>${html`<b/>`}</div>`;"

    def test_empty_expressions_are_ignored(self) -> None:
        assert compile("(<div>{/* a comment */}</div>);") == "html`<div/>`;"

    def test_fragments(self) -> None:
        assert compile("(<><a /><b>x</b></>);") == "html`<a/><b>x</b>`;"
        assert compile("(<div><>a</></div>);") == "html`<div>a</div>`;"

    def test_template_syntax_in_text_is_escaped(self) -> None:
        assert compile("(<p>a`b\\c</p>);") == "html`<p>a\\`b\\\\c</p>`;"

    def test_hole_open_is_escaped_across_merged_text(self) -> None:
        # "$" and "{" come from different children but share one quasi
        assert compile("(<div>${/* c */}&#123;x</div>);") == "html`<div>\\${x</div>`;"
        assert compile("(<div>$<>&#123;x</></div>);") == "html`<div>\\${x</div>`;"

    def test_spread_children_are_unsupported(self) -> None:
        with pytest.raises(UnsupportedConstruct, match="Spread children"):
            compile("(<div>{...items}</div>);")

    def test_namespaced_tags_are_unsupported(self) -> None:
        with pytest.raises(UnsupportedConstruct, match="Namespaced tag"):
            compile("(<svg:rect />);")


class TestHostProgram:
    def test_surrounding_code_is_untouched(self) -> None:
        code = "// header\nconst a = <a />;\nfunction b() {\n  return (\n    <b>x</b>\n  );\n}\n"
        result = transform_source(code)
        assert result.templates == 2
        assert result.code == (
            "// header\nconst a = html`<a/>`;\nfunction b() {\n  return html`<b>x</b>`;\n}\n"
        )

    def test_source_without_jsx(self) -> None:
        code = "const a = 1 < 2;\n"
        result = transform_source(code)
        assert result.templates == 0
        assert result.code == code

    def test_typescript_annotations(self) -> None:
        code = "const Foo = (props: { name: string }) => <p>{props.name}</p>;"
        assert compile(code) == "const Foo = (props: { name: string }) => html`<p>${props.name}</p>`;"

    def test_syntax_error(self) -> None:
        with pytest.raises(JsxSyntaxError) as exc:
            transform_source("(<div>);", file_path="app.jsx")
        assert exc.value.file_path == "app.jsx"

    def test_error_location(self) -> None:
        with pytest.raises(UnsupportedConstruct) as exc:
            transform_source("const a = 1;\n(<div>{...items}</div>);", file_path="app.jsx")
        assert exc.value.file_path == "app.jsx"
        assert exc.value.line == 2
        assert str(exc.value).startswith("app.jsx:2:")

    def test_read_classifies_tree(self) -> None:
        document = JsxDocument("(<div a>hi {name}</div>);")
        (root,) = document.roots()
        tree = document.read(root)

        assert isinstance(tree, Element)
        assert tree.explicit_close
        assert tree.children[0] == TextChild("hi ")
        assert isinstance(tree.children[1], ExpressionChild)
        assert tree.children[1].expression.parts == ("name",)

    def test_read_fragment(self) -> None:
        document = JsxDocument("const f = <>x</>;")
        (root,) = document.roots()
        assert document.read(root) == Fragment(children=(TextChild("x"),), line=1, column=11)


def test_integration_with_import_injection() -> None:
    result = transform_source(
        "const Foo = props => <div>hello</div>;", CompileConfig(tag="$$html")
    )
    assert result.templates == 1
    assert (
        inject_import(result.code, "$$html", "lit-html", "html")
        == 'import { html as $$html } from "lit-html";\n\n'
        "const Foo = props => $$html`<div>hello</div>`;"
    )
