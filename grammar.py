''' change: 2026-10-19
    create: 2026-10-12
    descrp: algebraic representation of combinatorial grammars
    to use: Build a grammar as a list of rules:

                from grammar import Rule, Call, Cons, Elem, Seq
                binary_trees = [
                    Rule('T', [Cons(1, [Elem('T'), Elem('T')]), Cons(0, [])]),
                ]

            A rule is a non-terminal name together with an ordered union of
            components.  A component either refers to another rule (Call) or
            is a weighted product of elements (Cons); an element is a single
            occurrence (Elem) or a Kleene star (Seq) of a rule.  Rules are
            namedtuples, so ('T', [...]) and Rule('T', [...]) compare equal.

            Optional checks for grammars that come from untrusted producers:

                from grammar import check_grammar, check_unique_rule_names
                check_grammar(binary_trees)             # AssertionError
                check_unique_rule_names(binary_trees)   # DuplicateRuleName
'''

from collections import namedtuple

from utils import CC, pre                           # ansi
from utils import InternalError                     # maybe

#=============================================================================#
#=====  0. GRAMMAR ENCODING  =================================================#
#=============================================================================#

Rule = namedtuple('Rule', ['name', 'alts'])

def same_field(lhs, rhs):
    sequences = (list, tuple)
    if isinstance(lhs, sequences) and isinstance(rhs, sequences):
        return list(lhs)==list(rhs)
    return lhs==rhs

class Tagged:
    '''
        Variant mixin: plain tuples compare by position only, which would make
        Call('A') equal Elem('A').  Tagged values compare by case, too, and
        list or tuple fields compare by contents, so Cons(0, ()) == EPSILON.
    '''
    __slots__ = ()

    def __eq__(self, rhs):
        return type(self)==type(rhs) and all(
            same_field(lhs_field, rhs_field)
            for lhs_field, rhs_field in zip(self, rhs)
        )

    def __ne__(self, rhs):
        # tuple.__ne__ would otherwise win over the inverse of __eq__
        return not self.__eq__(rhs)

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(self))

class Call(Tagged, namedtuple('Call', ['name'])):           __slots__ = ()
class Cons(Tagged, namedtuple('Cons', ['weight', 'elems'])): __slots__ = ()

class Elem(Tagged, namedtuple('Elem', ['name'])):           __slots__ = ()
class Seq (Tagged, namedtuple('Seq' , ['name'])):           __slots__ = ()

EPSILON_WEIGHT = 0
EPSILON = Cons(EPSILON_WEIGHT, [])

def is_epsilon(comp):
    return (
            isinstance(comp, Cons)
        and comp.weight==EPSILON_WEIGHT
        and not comp.elems
    )

def make_epsilon_rule(name):
    ''' build a rule of the form `name ::= epsilon` '''
    return Rule(name, [Cons(EPSILON_WEIGHT, [])])

#=============================================================================#
#=====  1. SHAPE CHECKS  =====================================================#
#=============================================================================#

def check_elem(elem, rule_name):
    pre(isinstance(elem, (Elem, Seq)),
        'rule `{}` has factor `{}` that is neither Elem nor Seq'.format(
            rule_name, elem
        )
    )
    pre(type(elem.name)==str,
        'rule `{}` refers to non-string name `{}`'.format(rule_name, elem.name)
    )

def check_component(comp, rule_name):
    if isinstance(comp, Call):
        pre(type(comp.name)==str,
            'rule `{}` calls non-string name `{}`'.format(rule_name, comp.name)
        )
    elif isinstance(comp, Cons):
        # bool is an int subclass but never a sensible weight
        pre(type(comp.weight)==int and comp.weight >= 0,
            'rule `{}` has weight `{}`; expected a non-negative int'.format(
                rule_name, comp.weight
            )
        )
        pre(isinstance(comp.elems, (list, tuple)),
            'rule `{}` has factors `{}` that are not a sequence'.format(
                rule_name, comp.elems
            )
        )
        for elem in comp.elems:
            check_elem(elem, rule_name)
    else:
        pre(False,
            'rule `{}` has component `{}` that is neither Call nor Cons'.format(
                rule_name, comp
            )
        )

def check_grammar(grammar):
    '''
        Assert that `grammar` has the shape described above: a sequence of
        (string, sequence of components) pairs.  Says nothing about closure;
        see names.is_closed for that.
    '''
    pre(isinstance(grammar, (list, tuple)), 'grammar must be a list of rules')
    for rule in grammar:
        pre(isinstance(rule, tuple) and len(rule)==2,
            'expected a (name, alts) pair but saw `{}`'.format(rule)
        )
        name, alts = rule
        pre(type(name)==str, 'rule name `{}` is not a string'.format(name))
        pre(isinstance(alts, (list, tuple)),
            'rule `{}` has alternatives `{}` that are not a sequence'.format(
                name, alts
            )
        )
        for comp in alts:
            check_component(comp, name)

#=============================================================================#
#=====  2. NAME UNIQUENESS  ==================================================#
#=============================================================================#

class DuplicateRuleName(InternalError):
    def __init__(self, names):
        self.names = sorted(names)
        super().__init__(
            'rules defined more than once: {}'.format(', '.join(self.names))
        )

def duplicate_rule_names(grammar):
    seen = set()
    dups = set()
    for name, _ in grammar:
        if name in seen:
            dups.add(name)
        seen.add(name)
    return dups

def check_unique_rule_names(grammar):
    dups = duplicate_rule_names(grammar)
    if dups:
        raise DuplicateRuleName(dups)

def rules_by_name(grammar):
    ''' map each rule name to its alternatives; names must be unique '''
    check_unique_rule_names(grammar)
    return {name: alts for name, alts in grammar}

#=============================================================================#
#=====  3. ILLUSTRATE GRAMMARS  ==============================================#
#=============================================================================#

if __name__=='__main__':
    binary_trees = [
        Rule('T', [Cons(1, [Elem('T'), Elem('T')]), Cons(0, [])]),
    ]
    check_grammar(binary_trees)
    print(CC+'binary trees @O {} @D '.format(binary_trees))
    print(CC+'epsilon rule @O {} @D '.format(make_epsilon_rule('L')))

    try:
        check_unique_rule_names(binary_trees + binary_trees)
    except DuplicateRuleName as e:
        print(CC+'@R {} @D '.format(e.msg))
