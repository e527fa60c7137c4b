"""Template generation functions for project scaffolding."""

import json

import yaml

from .types import ProjectProps, ScaffoldOptions

HAPI_VERSION = "^8.0.0"
EXAMPLE_PLUGIN_PATH = "../../../lib/plugins/example"


def _q(value: str) -> str:
    """Quote a string as a JSON literal."""
    return json.dumps(value)


def _author_line(props: ProjectProps) -> str:
    """Return 'Name <email> (url)' with the parts that are known."""
    parts = [props.author_name]
    if props.author_email:
        parts.append(f"<{props.author_email}>")
    if props.author_url:
        parts.append(f"({props.author_url})")
    return " ".join(part for part in parts if part)


def get_package_json_template(props: ProjectProps, options: ScaffoldOptions) -> str:
    """Generate package.json with the resolved plugin versions embedded.

    Args:
        props: Project answers and derived names
        options: Selected modules and the rendered dependencies fragment

    Returns:
        package.json content as string
    """
    dependencies = f'"hapi": "{HAPI_VERSION}"'
    if options.dependencies_fragment:
        dependencies += f",\n    {options.dependencies_fragment}"

    dev_dependencies = [
        '"code": "^1.2.1"',
        '"gulp": "^3.8.10"',
        '"gulp-jshint": "^1.9.0"',
        '"gulp-lab": "^1.0.0"',
        '"jshint-stylish": "^1.0.0"',
        '"lab": "^5.2.0"',
    ]
    if options.jscs_module:
        dev_dependencies.append('"gulp-jscs": "^1.4.0"')
    if options.release_module:
        dev_dependencies.append('"gulp-bump": "^0.1.11"')
        dev_dependencies.append('"gulp-git": "^0.5.5"')
    if options.coveralls_module:
        dev_dependencies.append('"gulp-coveralls": "^0.1.3"')
    dev_dependencies.sort()
    dev_block = ",\n    ".join(dev_dependencies)

    author_block = ""
    author = _author_line(props)
    if author:
        author_block = f'  "author": {_q(author)},\n'

    return f"""{{
  "name": {_q(props.slugname)},
  "description": {_q(props.description)},
  "version": "0.1.0",
  "homepage": {_q(props.homepage)},
{author_block}  "repository": {{
    "type": "git",
    "url": {_q(props.repo_url)}
  }},
  "bugs": {{
    "url": {_q(props.repo_url + '/issues')}
  }},
  "license": {_q(props.license)},
  "main": "lib/index.js",
  "engines": {{
    "node": ">= 0.10.0"
  }},
  "scripts": {{
    "start": "node lib/index.js",
    "test": "gulp test"
  }},
  "dependencies": {{
    {dependencies}
  }},
  "devDependencies": {{
    {dev_block}
  }},
  "keywords": [
    "hapi"
  ]
}}
"""


def get_readme_template(props: ProjectProps, options: ScaffoldOptions) -> str:
    """Generate README.md with badges and a quick start."""
    badges = (
        f"[![Build Status](https://secure.travis-ci.org/{props.github_username}/"
        f"{props.slugname}.png?branch=master)](http://travis-ci.org/"
        f"{props.github_username}/{props.slugname})"
    )
    if options.coveralls_module:
        badges += (
            f" [![Coverage Status](https://coveralls.io/repos/{props.github_username}/"
            f"{props.slugname}/badge.png)](https://coveralls.io/r/"
            f"{props.github_username}/{props.slugname})"
        )

    release = ""
    if options.release_module:
        release = """
## Release

```bash
gulp release --type patch   # or minor / major
```
"""

    copyright_holder = f" {props.author_name}" if props.author_name else ""
    return f"""# {props.name} {badges}

> {props.description}

## Getting Started

Install the module with: `npm install {props.slugname}`

Start the server:

```bash
npm start
```

The server composition (host, port and plugins) lives in `lib/config.json`.

## Development

```bash
npm test        # lint and run the lab test suite
gulp watch      # re-run lint and tests on change
```
{release}
## License

Copyright (c) {props.current_year}{copyright_holder}
Licensed under the {props.license} license.
"""


def get_gulpfile_template(props: ProjectProps, options: ScaffoldOptions) -> str:
    """Generate gulpfile.js with lint, test and the optional module tasks."""
    requires = [
        "var gulp = require('gulp');",
        "var jshint = require('gulp-jshint');",
        "var lab = require('gulp-lab');",
    ]
    if options.jscs_module:
        requires.append("var jscs = require('gulp-jscs');")
    if options.release_module:
        requires.append("var bump = require('gulp-bump');")
        requires.append("var git = require('gulp-git');")
    if options.coveralls_module:
        requires.append("var coveralls = require('gulp-coveralls');")

    lint_steps = [
        "    .pipe(jshint('.jshintrc'))",
        "    .pipe(jshint.reporter('jshint-stylish'))",
    ]
    if options.jscs_module:
        lint_steps.append("    .pipe(jscs())")
    lint_pipeline = "\n".join(lint_steps)

    tasks = [
        f"""gulp.task('lint', function () {{
  return gulp.src(paths.lint)
{lint_pipeline};
}});""",
        """gulp.task('test', ['lint'], function () {
  return gulp.src(paths.tests)
    .pipe(lab('-v -c -r lcov -o coverage.lcov'));
});""",
        """gulp.task('watch', ['test'], function () {
  gulp.watch(paths.watch, ['test']);
});""",
    ]
    if options.coveralls_module:
        tasks.append("""gulp.task('coveralls', ['test'], function () {
  return gulp.src('coverage.lcov')
    .pipe(coveralls());
});""")
    if options.release_module:
        tasks.append("""gulp.task('release', ['test'], function () {
  var type = process.argv.indexOf('--type') !== -1 ?
    process.argv[process.argv.indexOf('--type') + 1] : 'patch';

  return gulp.src('package.json')
    .pipe(bump({type: type}))
    .pipe(gulp.dest('./'))
    .pipe(git.commit('Release new version'));
});""")
    tasks.append("gulp.task('default', ['test']);")
    require_block = "\n".join(requires)
    task_block = "\n\n".join(tasks)

    return f"""/*
 * {props.name}
 * {props.homepage}
 */

'use strict';

{require_block}

var paths = {{
  lint: ['./gulpfile.js', './lib/**/*.js'],
  watch: ['./gulpfile.js', './lib/**', './test/**/*.js', '!test/{{temp,temp/**}}'],
  tests: ['./test/**/*.js', '!test/{{temp,temp/**}}']
}};

{task_block}
"""


def get_index_template(props: ProjectProps) -> str:
    """Generate lib/index.js, the hapi server composition bootstrap."""
    author = f" {props.author_name}" if props.author_name else ""
    return f"""/*
 * {props.name}
 * {props.homepage}
 *
 * Copyright (c) {props.current_year}{author}
 * Licensed under the {props.license} license.
 */

'use strict';

var Hapi = require('hapi');

var config = require('./config.json');

var manifest = {{
  servers: [{{
    host: config.host,
    port: config.port
  }}],
  plugins: config.plugins
}};

if (!module.parent) {{
  Hapi.Pack.compose(manifest, function (err, pack) {{
    if (err) {{
      console.log('Failed composing');
    }} else {{
      pack.start(function () {{
        console.log('Servers started');
      }});
    }}
  }});
}}

module.exports = manifest;
"""


def get_test_template(props: ProjectProps) -> str:
    """Generate the lab test stub for the manifest."""
    return f"""'use strict';

var Code = require('code');
var Lab = require('lab');
var {props.safe_slugname} = require('../lib/index.js');

var lab = exports.lab = Lab.script();
var describe = lab.describe;
var it = lab.it;
var expect = Code.expect;

describe('{props.slugname}', function () {{

  it('exposes a server manifest', function (done) {{
    expect({props.safe_slugname}.servers).to.be.an.array();
    expect({props.safe_slugname}.servers).to.have.length(1);
    done();
  }});

  it('exposes the configured plugins', function (done) {{
    expect({props.safe_slugname}.plugins).to.be.an.object();
    done();
  }});
}});
"""


def get_composer_config(custom_plugin: bool) -> dict[str, object]:
    """Return the lib/config.json document."""
    plugins: dict[str, object] = {}
    if custom_plugin:
        plugins[EXAMPLE_PLUGIN_PATH] = {}
    return {
        "host": "localhost",
        "port": 8000,
        "plugins": plugins,
    }


def get_example_plugin_package() -> dict[str, object]:
    """Return lib/plugins/example/package.json."""
    return {
        "name": "example",
        "version": "0.0.0",
        "main": "index.js",
        "private": True,
    }


def get_example_plugin_template() -> str:
    """Generate the boilerplate for a custom hapi plugin."""
    return """'use strict';

exports.register = function (plugin, options, next) {

  plugin.route({
    method: 'GET',
    path: '/example',
    handler: function (request, reply) {
      reply({message: 'Hello from the example plugin'});
    }
  });

  next();
};

exports.register.attributes = {
  pkg: require('./package.json')
};
"""


def get_travis_template(options: ScaffoldOptions) -> str:
    """Generate .travis.yml."""
    config: dict[str, object] = {
        "language": "node_js",
        "node_js": ["0.10", "0.12"],
    }
    if options.coveralls_module:
        config["after_script"] = "gulp coveralls"
    return yaml.safe_dump(config, default_flow_style=False, sort_keys=False)


def get_jshintrc_template() -> str:
    """Generate .jshintrc."""
    config = {
        "node": True,
        "curly": True,
        "eqeqeq": True,
        "immed": True,
        "latedef": "nofunc",
        "newcap": True,
        "noarg": True,
        "sub": True,
        "undef": True,
        "unused": True,
        "boss": True,
        "eqnull": True,
        "strict": True,
        "globals": {},
    }
    return json.dumps(config, indent=2) + "\n"


def get_jscs_template() -> str:
    """Generate .jscs.json."""
    config = {
        "preset": "google",
        "maximumLineLength": 120,
        "validateIndentation": 2,
        "requireCurlyBraces": ["if", "else", "for", "while", "do", "try", "catch"],
    }
    return json.dumps(config, indent=2) + "\n"


def get_editorconfig_template() -> str:
    """Generate .editorconfig."""
    return """root = true

[*]
indent_style = space
indent_size = 2
end_of_line = lf
charset = utf-8
trim_trailing_whitespace = true
insert_final_newline = true

[*.md]
trim_trailing_whitespace = false
"""


def get_gitignore_template() -> str:
    """Generate .gitignore."""
    return """node_modules/
npm-debug.log
coverage.lcov
coverage.html
.DS_Store
"""
