''' change: 2026-10-19
    create: 2026-10-12
    descrp: render grammars as text in union/product notation
    to use: To obtain the text of some grammar, type

                from pretty import str_from_grammar
                str_from_grammar(grammar)

            For example, the binary-tree grammar
                [Rule('T', [Cons(1, [Elem('T'), Elem('T')]), Cons(0, [])])]
            renders as
                T ::= Cons(<z^1> * Elem(T) * Elem(T)) + Cons()

            Rules are joined by newlines, alternatives by ` + ` (the empty
            union is `0`), factors by ` * ` (the empty product is `1`).  The
            weight term `<z^w>` is dropped when w is zero, and the epsilon
            constructor is written `Cons()` rather than `Cons(1)`, which the
            empty-product rule alone would give.  Downstream tools read this
            text, so the format must not drift.

            For a terminal, `display_grammar` returns the same text tinted
            with ANSI colors.
'''

from utils import CC, pre                       # ansi

from grammar import Rule, Call, Cons, Elem, Seq, is_epsilon

#=============================================================================#
#=====  0. NOTATION  =========================================================#
#=============================================================================#

RULE_SEP      = '\n'
DEFINES       = ' ::= '
UNION_SEP     = ' + '
PRODUCT_SEP   = ' * '
EMPTY_UNION   = '0'
EMPTY_PRODUCT = '1'

#=============================================================================#
#=====  1. PLAIN TEXT  =======================================================#
#=============================================================================#

def str_from_elem(elem):
    if isinstance(elem, Seq):
        return 'Seq({})'.format(elem.name)
    return 'Elem({})'.format(elem.name)

def str_from_product(terms, render=str_from_elem):
    if not terms:
        return EMPTY_PRODUCT
    return PRODUCT_SEP.join(render(t) for t in terms)

def str_from_union(terms, render):
    if not terms:
        return EMPTY_UNION
    return UNION_SEP.join(render(t) for t in terms)

def str_from_component(comp):
    if isinstance(comp, Call):
        return 'Call({})'.format(comp.name)
    if comp.weight != 0:
        return 'Cons(<z^{}>{}{})'.format(
            comp.weight, PRODUCT_SEP, str_from_product(comp.elems)
        )
    if is_epsilon(comp):
        return 'Cons()'
    return 'Cons({})'.format(str_from_product(comp.elems))

def str_from_rule(rule):
    name, comps = rule
    return name + DEFINES + str_from_union(comps, str_from_component)

def str_from_grammar(grammar):
    return RULE_SEP.join(str_from_rule(rule) for rule in grammar)

#=============================================================================#
#=====  2. COLORIZED TEXT  ===================================================#
#=============================================================================#

# markup codes are understood by utils.CC; CC.strip(markup) gives plain text

def markup_from_component(comp):
    text = str_from_component(comp)
    return ('@B ' if isinstance(comp, Call) else '@O ') + text + '@D '

def markup_from_rule(rule):
    name, comps = rule
    return (
        '@P ' + name + '@A ' + DEFINES + '@D ' +
        str_from_union(comps, markup_from_component)
    )

def markup_from_grammar(grammar):
    return RULE_SEP.join(markup_from_rule(rule) for rule in grammar)

def display_grammar(grammar):
    return str(CC + markup_from_grammar(grammar))

if __name__=='__main__':
    grammar = [
        Rule('Name', [Call('Other'), Cons(1, [Elem('A'), Seq('B')])]),
        Rule('T', [Cons(1, [Elem('T'), Elem('T')]), Cons(0, [])]),
        Rule('Z', []),
    ]
    text = str_from_grammar(grammar)
    pre(text==str_from_grammar(grammar), 'rendering is not deterministic')
    print(text)
    print(display_grammar(grammar))
