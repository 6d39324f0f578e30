import pytest

import parsley
from parsley.errors import ParsleyError, UndefinedSymbolError
from parsley.types import Symbol, Undefined


def test_nested_arithmetic():
    assert parsley.run("(* (+ 3 4 5) (- 5 2))") == 36


def test_sum_of_squares(ctx):
    ctx.run(
        """
        (define (square x) (* x x))
        (define (sum-of-squares x y) (+ (square x) (square y)))
        """
    )
    assert ctx.run("(sum-of-squares 3 4)") == 25


def test_null_predicate():
    assert parsley.run("(null? '())") is True


def test_empty_program_is_undefined():
    assert parsley.run("  ; nothing here\n") is Undefined


def test_rational_numbers(ctx):
    ctx.run(
        """
        (define (make-rat n d)
          (let ((g (gcd n d)))
            (cons (/ n g) (/ d g))))
        (define (numer x) (car x))
        (define (denom x) (cdr x))
        (define (add-rat x y)
          (make-rat (+ (* (numer x) (denom y))
                       (* (numer y) (denom x)))
                    (* (denom x) (denom y))))
        (define one-half (make-rat 1 2))
        (define one-third (make-rat 1 3))
        """
    )
    assert str(ctx.run("(add-rat one-half one-third)")) == "(5 . 6)"
    assert str(ctx.run("(add-rat one-half one-half)")) == "(1 . 1)"


def test_higher_order_composition(ctx):
    ctx.run(
        """
        (define (compose f g) (lambda (x) (f (g x))))
        (define inc (lambda (x) (+ x 1)))
        (define double (lambda (x) (* x 2)))
        """
    )
    assert ctx.run("((compose inc double) 5)") == 11
    assert str(ctx.run("(map (compose double inc) '(1 2 3))")) == "(4 6 8)"


def test_accumulate_with_closures(ctx):
    ctx.run(
        """
        (define (make-counter)
          (define count 0)
          (lambda () count))
        (define (range a b)
          (if (>= a b) '() (cons a (range (+ a 1) b))))
        """
    )
    assert str(ctx.run("(range 0 5)")) == "(0 1 2 3 4)"
    assert ctx.run("(foldl + 0 (range 0 31))") == 465
    assert ctx.run("((make-counter))") == 0


def test_variadic_procedures(ctx):
    ctx.run("(define (count-args . args) (length args))")
    ctx.run("(define (head-and-rest x . more) (list x more))")
    assert ctx.run("(count-args)") == 0
    assert ctx.run("(count-args 1 2 3)") == 3
    assert str(ctx.run("(head-and-rest 1 2 3)")) == "(1 (2 3))"


def test_quoted_data_is_not_evaluated(ctx):
    assert ctx.run("(car '(undefined-thing 2))") == Symbol("undefined-thing")


def test_printing_program(ctx):
    with ctx.capture() as out:
        ctx.run(
            """
            (define (show-all items)
              (if (null? items)
                  'done
                  (begin (display (car items)) (newline) (show-all (cdr items)))))
            (show-all '(1 "two" #\\3))
            """
        )
    assert out.getvalue() == "1\ntwo\n3\n"


def test_errors_share_a_base_class(ctx):
    with pytest.raises(ParsleyError):
        ctx.run("(car 1)")
    with pytest.raises(UndefinedSymbolError):
        ctx.run("(no-such-procedure 1)")


def test_context_survives_errors(ctx):
    ctx.run("(define x 1)")
    with pytest.raises(ParsleyError):
        ctx.run("(define (f) (car '())) (f)")
    assert len(ctx.user) == 1
    assert ctx.cont.parent is None
    assert ctx.run("(+ x 1)") == 2
