# This file is part of anonboard, which is licensed under the GNU Affero General Public License (AGPL) version 3.0.
# You should have received a copy of the GPL along with this program. If not, see <http://www.gnu.org/licenses/>.

from anonboard import create_app, db

app = create_app()


@app.shell_context_processor
def make_shell_context():
    return {'db': db, 'app': app}


@app.teardown_appcontext
def shutdown_session(exception=None):
    if exception:
        db.session.rollback()
    db.session.remove()
