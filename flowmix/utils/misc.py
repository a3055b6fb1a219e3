# -*- coding: utf-8 -*-
# FlowMix: Stream and Mixer Modules for Process Flow Networks
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
This module includes arbitrary classes and functions.

"""
__all__ = ('format_title', 'ticket_key')

# %% String functions

def format_title(line):
    """
    Return a title-like line from a class name.

    Examples
    --------
    >>> format_title('Mixer')
    'Mixer'
    >>> format_title('StaticMixer')
    'Static mixer'
    >>> format_title('two_way_Mixer')
    'Two way mixer'

    """
    line = line.replace('_', ' ')
    words = []
    word = ''
    last = ''
    for i in line:
        if i.isupper() and last.isalpha() and not last.isupper():
            words.append(word)
            word = i
        else:
            word += i
        last = i
    words.append(word)
    line = ' '.join([i.strip(' ') for i in words if i.strip(' ')])
    first_word, *rest = line.split(' ')
    words = [first_word[0].capitalize() + first_word[1:]]
    for word in rest:
        if not word.isupper(): word = word.lower()
        words.append(word)
    return ' '.join(words)

def ticket_key(obj):
    """Return sorting key of objects with default IDs (e.g. 's1' < 's2' < 's10');
    other IDs go first."""
    ID = str(obj)
    num = ID.lstrip('abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_')
    if num.isnumeric(): return (1, ID[:len(ID) - len(num)], int(num))
    else: return (0, ID, -1)
