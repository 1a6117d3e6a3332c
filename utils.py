''' change: 2026-10-19
    create: 2026-10-12
    descrp: Helpers for ANSI screen coloration, console status lines, and
            maybe types.
    to use: Import:
                from utils import CC, pre, status                   # ansi
                from utils import secs_endured                      # profiling
                from utils import InternalError                     # maybe
            Or, run as is to see a pretty rainbow:
                python utils.py
'''

import time

#=============================================================================#
#=====  0. ANSI CONTROL FOR RICH OUTPUT TEXT =================================#
#=============================================================================#

#~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~#
#~~~~~~~~~~~~~  0.0 Define Text Modifier  ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~#

class Colorizer(object):
    '''
        Text modifier class, used as in
            print(CC+'@R i am red @D ')
        where CC is an instance of this class.
    '''
    def __init__(self):

        #-------------  0.0.0 ANSI command abbreviations  --------------------#

        self.ANSI_by_name = {
            '@^ ': '\033[1A',                 # motion: up

            '@K ': '\033[38;2;000;000;000m',  # color: black
            '@A ': '\033[38;2;128;128;128m',  # color: gray
            '@W ': '\033[38;2;255;255;255m',  # color: white

            '@R ': '\033[38;2;240;032;032m',  # color: red
            '@O ': '\033[38;2;224;128;000m',  # color: orange
            '@Y ': '\033[38;2;255;224;000m',  # color: yellow

            '@G ': '\033[38;2;064;224;000m',  # color: green
            '@C ': '\033[38;2;000;192;192m',  # color: cyan

            '@B ': '\033[38;2;096;064;255m',  # color: blue
            '@P ': '\033[38;2;192;000;192m',  # color: purple
        }

        #-------------  0.0.1 default color is cyan  -------------------------#
        self.ANSI_by_name['@D '] = self.ANSI_by_name['@C ']

        self.text = ''

    #-----------------  0.0.2 define application to strings  -----------------#

    def __add__(self, rhs):
        ''' Transition method of type Colorizer -> String -> Colorizer '''
        assert type(rhs) == type(''), 'expected types (Colorizer + string)'
        for name, ansi in self.ANSI_by_name.items():
            rhs = rhs.replace(name, ansi)
        self.text += rhs
        return self

    def __str__(self):
        ''' Emission method of type Colorizer -> String '''
        rtrn = self.text
        self.text = ''
        return rtrn

    def strip(self, text):
        ''' Remove color codes, leaving the plain text they decorate '''
        for name in self.ANSI_by_name:
            text = text.replace(name, '')
        return text

#~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~#
#~~~~~~~~~~~~~  0.1 Global Initializations  ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~#

CC = Colorizer()

#~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~#
#~~~~~~~~~~~~~  0.2 Styles for Special Message Types  ~~~~~~~~~~~~~~~~~~~~~~~~#

def pre(condition, message):
    ''' assert precondition; if fail, complain in red '''
    assert condition, str(CC+'@R '+message+'@D ')

def status(message):
    ''' print a gray-stamped progress line '''
    print(CC+'@A [{:8.2f}s] @D {}'.format(secs_endured(), message))

#=============================================================================#
#=====  1. RESOURCE PROFILING  ===============================================#
#=============================================================================#

start_time = time.time()
secs_endured = lambda: (time.time()-start_time)

#=============================================================================#
#=====  2. SIMULATE MAYBE TYPES VIA EXCEPTIONS  ==============================#
#=============================================================================#

class InternalError(Exception):
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

#=============================================================================#
#=====  3. ILLUSTRATE UTILITIES  =============================================#
#=============================================================================#

if __name__=='__main__':
    for code in 'DWAKROYGCBP':
        print(CC + '@{} moo'.format(code))
    status('done after rainbow')
