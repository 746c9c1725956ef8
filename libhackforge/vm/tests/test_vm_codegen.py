import pytest

from libhackforge.assembler import Assembler
from libhackforge.vm import TranslatorConfig, VMTranslator
from libhackforge.vm.codegen import sanitize_file_name
from libhackforge.vm.errors import (
    UnknownArithmeticOperationError,
    UnknownSegmentError,
    UnrecognizedCommandError,
)

PUSH_TAIL = ["@SP", "A=M", "M=D", "@SP", "M=M+1"]


def _translate(*lines: str, config: TranslatorConfig | None = None) -> list[str]:
    return VMTranslator("Test", config=config).translate(lines)


def test_codegen_push_constant() -> None:
    assert _translate("push constant 7") == ["@7", "D=A", *PUSH_TAIL]


def test_codegen_push_ends_with_same_sequence() -> None:
    for line in (
        "push constant 1",
        "push local 2",
        "push argument 0",
        "push this 3",
        "push that 4",
        "push pointer 1",
        "push temp 6",
        "push static 5",
    ):
        assert _translate(line)[-len(PUSH_TAIL) :] == PUSH_TAIL


def test_codegen_push_based_segment() -> None:
    assert _translate("push local 2") == [
        "@2",
        "D=A",
        "@LCL",
        "A=D+M",
        "D=M",
        *PUSH_TAIL,
    ]


def test_codegen_direct_segment_addresses() -> None:
    assert _translate("push pointer 0")[0] == "@3"
    assert _translate("push pointer 1")[0] == "@4"
    assert _translate("push temp 2")[0] == "@6"
    assert _translate("push static 3")[0] == "@Test.3"
    config = TranslatorConfig(temp_segment_base=5)
    assert _translate("pop temp 2", config=config)[-2:] == ["@7", "M=D"]


def test_codegen_pop_based_segment_uses_scratch_registers() -> None:
    assembly = _translate("pop that 5")
    assert assembly[:5] == ["@SP", "A=M-1", "D=M", "@SP", "M=M-1"]
    assert "@THAT" in assembly
    assert "@R13" in assembly
    assert "@R14" in assembly


def test_codegen_comparison_labels_are_unique() -> None:
    assembly = _translate("eq", "lt", "gt")
    labels = [line for line in assembly if line.startswith("(")]
    assert labels == [
        "(LABEL.0.start)",
        "(LABEL.0.end)",
        "(LABEL.1.start)",
        "(LABEL.1.end)",
        "(LABEL.2.start)",
        "(LABEL.2.end)",
    ]
    assert "D;JEQ" in assembly
    assert "D;JLT" in assembly
    assert "D;JGT" in assembly


def test_codegen_comparison_label_prefix() -> None:
    config = TranslatorConfig(comparison_label_prefix="CMP")
    assert "(CMP.0.start)" in _translate("eq", config=config)


def test_codegen_output_is_accepted_by_assembler() -> None:
    assembly = _translate(
        "push constant 7",
        "push local 1",
        "pop argument 2",
        "pop static 0",
        "pop pointer 1",
        "add",
        "sub",
        "neg",
        "eq",
        "gt",
        "lt",
        "and",
        "or",
        "not",
        config=TranslatorConfig(emit_comments=True),
    )
    words = Assembler().assemble(assembly)
    assert words
    assert all(len(word) == 16 for word in words)


def test_codegen_emit_comments() -> None:
    config = TranslatorConfig(emit_comments=True)
    assert _translate("push constant 7", config=config)[0] == "// push constant 7"
    assert not any(line.startswith("//") for line in _translate("push constant 7"))


def test_codegen_skips_comments_and_blanks() -> None:
    assert _translate("// comment only", "   ", "add // inline") == _translate("add")


def test_codegen_unsupported_commands_are_skipped_with_warning() -> None:
    warnings: list[str] = []
    translator = VMTranslator("Test", on_warning=warnings.append)
    assert translator.translate(
        ["label LOOP", "goto LOOP", "if-goto END", "return"],
    ) == []
    assert len(warnings) == 4
    assert "if-goto" in warnings[2]


def test_codegen_unrecognized_commands() -> None:
    warnings: list[str] = []
    translator = VMTranslator("Test", on_warning=warnings.append)
    assert translator.translate(["frobnicate 1", "xor"]) == []
    assert len(warnings) == 2

    translator = VMTranslator("Test", config=TranslatorConfig(strict=True))
    with pytest.raises(UnrecognizedCommandError):
        translator.translate(["frobnicate 1"])


def test_codegen_strict_unknown_arithmetic_operation() -> None:
    translator = VMTranslator("Test", config=TranslatorConfig(strict=True))
    with pytest.raises(UnknownArithmeticOperationError) as error:
        translator.translate(["push constant 1", "xor"])
    assert error.value.operation == "xor"


def test_codegen_errors_propagate() -> None:
    with pytest.raises(UnknownSegmentError):
        _translate("push heap 0")


def test_codegen_finalized_translator() -> None:
    translator = VMTranslator("Test")
    assert translator.classify_and_translate("push constant 1")
    assert translator.finalize() == []
    with pytest.raises(AssertionError):
        translator.classify_and_translate("push constant 1")


def test_sanitize_file_name() -> None:
    assert sanitize_file_name("Main") == "Main"
    assert sanitize_file_name("my-program v2") == "my_program_v2"
    assert sanitize_file_name("1st") == "_1st"
    assert sanitize_file_name("") == "_"


def test_codegen_end_loop() -> None:
    config = TranslatorConfig(emit_end_loop=True)
    assembly = VMTranslator("Main", config=config).translate(["push constant 1"])
    assert assembly[-3:] == ["(Main$END)", "@Main$END", "0;JMP"]
    assert "(Main$END)" not in _translate("push constant 1")


def test_codegen_pointer_and_temp_beyond_platform_registers() -> None:
    assert _translate("push pointer 2")[0] == "@5"
    assert _translate("push temp 8")[0] == "@12"
