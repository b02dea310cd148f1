"""Tests for the tinyclass JavaScript code generator."""

import pytest

from tinyclass.ast_nodes import ExprStmt, Program
from tinyclass.codegen import CodeGenerator
from tinyclass.errors import CodegenError
from tinyclass.lexer import Lexer
from tinyclass.parser import Parser


def generate(source: str) -> str:
    program = Parser(Lexer(source).tokenize()).parse_or_raise()
    return CodeGenerator(program).generate()


def assert_contains(source: str, *fragments: str):
    """Assert that generated JavaScript contains all given fragments."""
    output = generate(source)
    for frag in fragments:
        assert frag in output, f"Expected '{frag}' in output:\n{output}"


ANIMALS = '''
class Animal {
  init() {}
  method speak() Void { return println(0); }
}
class Cat extends Animal {
  init() { super(); }
  method speak() Void { return println(1); }
}
class Dog extends Animal {
  init() { super(); }
  method speak() Void { return println(2); }
}

Animal cat;
Animal dog;
cat = new Cat();
dog = new Dog();
cat.speak();
dog.speak();
'''

ANIMALS_JS = '''\
function Animal() {
}
Animal.prototype.speak = function() {
\treturn console.log(0);
};
function Cat() {
\tAnimal.call(this);
}
Cat.prototype = Object.create(Animal.prototype);
Cat.prototype.constructor = Cat;
Cat.prototype.speak = function() {
\treturn console.log(1);
};
function Dog() {
\tAnimal.call(this);
}
Dog.prototype = Object.create(Animal.prototype);
Dog.prototype.constructor = Dog;
Dog.prototype.speak = function() {
\treturn console.log(2);
};
let cat; // Animal
let dog; // Animal
cat = new Cat();
dog = new Dog();
cat.speak();
dog.speak();
'''


class TestCanonicalProgram:
    def test_exact_output(self):
        assert generate(ANIMALS) == ANIMALS_JS

    def test_one_constructor_per_class(self):
        output = generate(ANIMALS)
        for name in ("Animal", "Cat", "Dog"):
            assert output.count(f"function {name}(") == 1

    def test_one_method_per_class(self):
        output = generate(ANIMALS)
        assert output.count(".prototype.speak = function()") == 3

    def test_two_prototype_link_pairs(self):
        output = generate(ANIMALS)
        assert output.count("= Object.create(") == 2
        assert output.count(".prototype.constructor =") == 2

    def test_global_declarations(self):
        output = generate(ANIMALS)
        assert output.count("; // Animal") == 2

    def test_deterministic(self):
        assert generate(ANIMALS) == generate(ANIMALS)


class TestClasses:
    def test_root_class_has_no_prototype_setup(self):
        output = generate("class A { }")
        assert output == "function A() {\n}\n"
        assert "Object.create" not in output

    def test_constructor_parameters_and_body(self):
        assert_contains(
            "class P { Int x; init(Int a, Int b) { x = a + b; } }",
            "function P(a, b) {\n\tx = a + b;\n}",
        )

    def test_super_call_with_arguments(self):
        assert_contains(
            "class B extends A { init(Int n) { super(n, 1); } }",
            "\tA.call(this, n, 1);",
        )

    def test_super_call_without_arguments(self):
        assert_contains("class B extends A { init() { super(); } }", "\tA.call(this);")

    def test_derived_class_without_init(self):
        output = generate("class B extends A { }")
        assert output == (
            "function B() {\n}\n"
            "B.prototype = Object.create(A.prototype);\n"
            "B.prototype.constructor = B;\n"
        )

    def test_super_in_root_class_calls_object(self):
        assert_contains("class A { init() { super(); } }", "\tObject.call(this);")

    def test_method_with_parameters(self):
        assert_contains(
            "class M { method add(Int a, Int b) Int { return a + b; } }",
            "M.prototype.add = function(a, b) {\n\treturn a + b;\n};",
        )

    def test_empty_method(self):
        assert_contains("class M { method m() Void { } }",
                        "M.prototype.m = function() {\n\n};")


class TestStatements:
    def test_var_dec(self):
        assert generate("Int x;") == "let x; // Int\n"

    def test_assignment(self):
        assert generate("x = 5;") == "x = 5;\n"

    def test_expression_statement(self):
        assert generate("println(1);") == "console.log(1);\n"

    def test_if(self):
        assert generate("if (true) x = 1;") == "if (true) x = 1;\n"

    def test_if_else(self):
        assert generate("if (b) { x = 1; } else { x = 2; }") == (
            "if (b) {\nx = 1;\n} else {\nx = 2;\n}\n")

    def test_while_with_break(self):
        assert generate("while (true) { break; }") == "while (true) {\nbreak;\n}\n"

    def test_bare_return(self):
        assert_contains("class A { method m() Void { return; } }", "\treturn;")

    def test_block(self):
        assert generate("{ Int x; }") == "{\nlet x; // Int\n}\n"


class TestExpressions:
    def test_binary(self):
        assert generate("5 + 3;") == "5 + 3;\n"

    def test_string_literal_quoted(self):
        assert generate('println("hi");') == 'console.log("hi");\n'

    def test_string_literal_escaped(self):
        assert generate("println('say \"x\"');") == 'console.log("say \\"x\\"");\n'

    def test_boolean_literals(self):
        assert generate("x = true; y = false;") == "x = true;\ny = false;\n"

    def test_new(self):
        assert generate("x = new Point(1, 2);") == "x = new Point(1, 2);\n"

    def test_call_chain(self):
        assert generate("a.b().c(1, x);") == "a.b().c(1, x);\n"

    def test_this(self):
        assert_contains("class A { method me() A { return this; } }", "\treturn this;")

    def test_precedence_kept_without_parentheses(self):
        assert generate("x = 1 + 2 * 3;") == "x = 1 + 2 * 3;\n"

    def test_grouping_parenthesized(self):
        assert generate("x = (1 + 2) * 3;") == "x = (1 + 2) * 3;\n"

    def test_right_grouping_parenthesized(self):
        assert generate("x = 10 - (4 - 3);") == "x = 10 - (4 - 3);\n"

    def test_left_associative_chain_unparenthesized(self):
        assert generate("x = 10 - 4 - 3;") == "x = 10 - 4 - 3;\n"


class TestErrors:
    def test_unknown_statement_kind(self):
        program = Program(statements=[object()])
        with pytest.raises(CodegenError, match="statement"):
            CodeGenerator(program).generate()

    def test_unknown_expression_kind(self):
        program = Program(statements=[ExprStmt(expression=object())])
        with pytest.raises(CodegenError, match="expression"):
            CodeGenerator(program).generate()


class TestBranches:
    def test_declaration_as_if_branch_is_braced(self):
        assert generate("if (b) Int x; else x = 1;") == (
            "if (b) {\nlet x; // Int\n} else x = 1;\n")

    def test_declaration_as_while_body_is_braced(self):
        assert generate("while (b) Int x;") == "while (b) {\nlet x; // Int\n}\n"


class TestLongChains:
    def test_long_operator_chain(self):
        terms = " + ".join(["1"] * 5000)
        assert generate(f"x = {terms};") == f"x = {terms};\n"

    def test_grouping_inside_long_chain(self):
        terms = " - ".join(["2"] * 2000)
        assert generate(f"x = ({terms}) * 3;") == f"x = ({terms}) * 3;\n"
