''' change: 2026-10-19
    create: 2026-10-12
    descrp: close a grammar by defining every undefined symbol as epsilon
    to use: To complete a grammar, type
                from completion import complete
                closed = complete(grammar)

            For each leaf (see names.py) we append a rule `leaf ::= Cons()`.
            The input is left untouched; a new list is returned whose prefix
            is the input's rules.  New rules come in sorted order of name, so
            completion is deterministic.  Completing a closed grammar adds
            nothing.
'''

from utils import CC, status                    # ansi

from grammar import Rule, Call, Cons, Elem, Seq, make_epsilon_rule
from names import leaves_of_grammar

def complete(grammar, verbose=False):
    leaves = sorted(leaves_of_grammar(grammar))
    if verbose and leaves:
        status('closing @O {} @D leaves: @P {} @D '.format(
            len(leaves), ' '.join(leaves)
        ))
    return list(grammar) + [make_epsilon_rule(name) for name in leaves]

if __name__=='__main__':
    from pretty import str_from_grammar

    grammar = [
        Rule('A', [Call('B')]),
        Rule('S', [Cons(1, [Seq('L'), Elem('A')])]),
    ]
    closed = complete(grammar, verbose=True)
    print(CC+'from @P \n{} \n@D we find @O \n{} @D '.format(
        str_from_grammar(grammar), str_from_grammar(closed)
    ))
