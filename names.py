''' change: 2026-10-19
    create: 2026-10-12
    descrp: which symbols a grammar mentions, which it defines, and which it
            mentions without defining (its leaves)
    to use: To find the undefined symbols of a grammar, type
                from names import leaves_of_grammar
                leaves_of_grammar(grammar)  # e.g. {'B'}
            All functions here are pure and return sets of strings.
'''

from utils import CC                             # ansi

from grammar import Call, Cons, Elem, Seq, Rule

def name_of_elem(elem):
    return elem.name

def names_of_component(comp):
    if isinstance(comp, Call):
        return {comp.name}
    return {name_of_elem(elem) for elem in comp.elems}

def names_of_rule(rule):
    ''' names referenced by the rule's alternatives, not its own name '''
    _, comps = rule
    names = set()
    for comp in comps:
        names |= names_of_component(comp)
    return names

def names_of_grammar(grammar):
    names = set()
    for rule in grammar:
        names |= names_of_rule(rule)
    return names

def rule_names_of_grammar(grammar):
    return {name for name, _ in grammar}

def leaves_of_grammar(grammar):
    ''' referenced but undefined; defined-but-unused names are not leaves '''
    return names_of_grammar(grammar) - rule_names_of_grammar(grammar)

def is_closed(grammar):
    return not leaves_of_grammar(grammar)

if __name__=='__main__':
    grammar = [
        Rule('S', [Cons(1, [Seq('L')]), Call('T')]),
        Rule('T', [Cons(1, [Elem('T'), Elem('T')]), Cons(0, [])]),
    ]
    print(CC+'mentioned @O {} @D '.format(sorted(names_of_grammar(grammar))))
    print(CC+'defined   @O {} @D '.format(sorted(rule_names_of_grammar(grammar))))
    print(CC+'leaves    @R {} @D '.format(sorted(leaves_of_grammar(grammar))))
