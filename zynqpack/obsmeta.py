# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

from lxml.etree import SubElement, XMLParser, fromstring, tostring

from zynqpack.templates import pack_template


_parser = XMLParser(remove_blank_text=True, no_network=True)


def _parse(meta):
    return fromstring(meta.encode('utf-8'), parser=_parser)


def _serialize(root):
    return tostring(root, pretty_print=True, encoding='unicode')


def project_meta(project, distro, user):
    return pack_template('project-meta.xml.mako', {
        'project': project,
        'distro': distro,
        'user': user,
    })


def project_prjconf():
    return pack_template('prjconf.mako', {})


def has_repository(meta, name):
    """
    >>> has_repository('<project name="p"><repository name="standard"/></project>', 'standard')
    True

    >>> has_repository('<project name="p"><repository name="images"/></project>', 'standard')
    False
    """
    return _parse(meta).find(f'repository[@name="{name}"]') is not None


def add_repository(meta, name, path_project, path_repository, arch):
    """
    Append a repository building against `path_project/path_repository`.

    >>> print(add_repository('<project name="p"><title/></project>',
    ...                      'standard', 'devel:ARM', 'standard', 'aarch64'), end='')
    <project name="p">
      <title/>
      <repository name="standard">
        <path project="devel:ARM" repository="standard"/>
        <arch>aarch64</arch>
      </repository>
    </project>
    """
    root = _parse(meta)

    repo = SubElement(root, 'repository', name=name)
    SubElement(repo, 'path', project=path_project, repository=path_repository)
    SubElement(repo, 'arch').text = arch

    return _serialize(root)


def _is_package_disable(el):
    if 'repository' in el.attrib:
        return True
    return not el.attrib


def enable_package(meta):
    """
    Remove the package wide and per repository disable flags which a linked
    package inherits, keeping the per arch ones.

    >>> print(enable_package('''<package name="zynqmp-fsbl" project="p">
    ...   <build><disable/><disable repository="images"/><disable arch="x86_64"/></build>
    ...   <publish><disable/></publish>
    ... </package>'''), end='')
    <package name="zynqmp-fsbl" project="p">
      <build>
        <disable arch="x86_64"/>
      </build>
      <publish/>
    </package>
    """
    root = _parse(meta)

    for el in list(root.iter('disable')):
        if _is_package_disable(el):
            el.getparent().remove(el)

    return _serialize(root)
